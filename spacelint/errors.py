"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from SpaceLintUserError.

Programming errors and bugs should NOT inherit from SpaceLintUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class SpaceLintUserError(Exception):
    """
    Base class for all user-facing errors in spacelint.

    These errors indicate problems that the user can fix:
    configuration issues, unknown rule ids, bad command line options.
    """
    pass


class ConfigError(SpaceLintUserError):
    """Invalid spacelint.yaml contents or --rule override."""
    pass


class UnknownRuleError(SpaceLintUserError):
    """Rule id is not present in the registry."""

    def __init__(self, rule_id: str):
        super().__init__(f"Unknown rule: {rule_id}")
        self.rule_id = rule_id


__all__ = ["SpaceLintUserError", "ConfigError", "UnknownRuleError"]
