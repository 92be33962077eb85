"""
Disallows or enforces spaces inside computed properties.

Checks `obj[key]` member access and `{ [key]: value }` property keys.
Three modes:
  never (default): no space after "[" and before "]"
  always: exactly that space is required
  even: 0 or 1 space, the same on both sides, brackets on one line
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Sequence, Union

from ..diagnostics import Diagnostic, DiagnosticsSink
from ..tokens import BracketedRegion, Token
from .base import BaseRule, RuleMeta

RULE_ID = "computed-property-even-spacing"


class SpacingMode(Enum):
    NEVER = "never"
    ALWAYS = "always"
    EVEN = "even"

    @classmethod
    def resolve(cls, options: Optional[Sequence[Any]] = None) -> SpacingMode:
        """
        Pick the mode from the rule options.

        Only the first option is looked at. Anything other than
        "always" or "even" (including no options at all) means "never".
        """
        value = options[0] if options else None
        if value == cls.ALWAYS.value:
            return cls.ALWAYS
        if value == cls.EVEN.value:
            return cls.EVEN
        return cls.NEVER


def is_spaced(left: Token, right: Token) -> bool:
    """Whether there is any gap between the two tokens' ranges."""
    return left.end < right.start


def is_same_line(left: Token, right: Token) -> bool:
    return left.start_line == right.start_line


def _no_beginning_space(token: Token) -> Diagnostic:
    return Diagnostic.at(RULE_ID, token.start_position,
                         f"There should be no space after '{token.text}'")


def _no_ending_space(token: Token) -> Diagnostic:
    return Diagnostic.at(RULE_ID, token.start_position,
                         f"There should be no space before '{token.text}'")


def _required_beginning_space(token: Token) -> Diagnostic:
    return Diagnostic.at(RULE_ID, token.start_position,
                         f"A space is required after '{token.text}'")


def _required_ending_space(token: Token) -> Diagnostic:
    return Diagnostic.at(RULE_ID, token.start_position,
                         f"A space is required before '{token.text}'")


def _evaluate_even(region: BracketedRegion) -> List[Diagnostic]:
    before, first, last, after = region.before, region.first, region.last, region.after

    if not is_same_line(before, after):
        return [Diagnostic.at(RULE_ID, region.node, 'Expected "[" and "]" to be on the same line')]

    start_space = first.start_column - before.end_column
    end_space = after.start_column - last.end_column

    if start_space != end_space or start_space > 1 or end_space > 1:
        return [Diagnostic.at(RULE_ID, region.node, 'Expected 1 or 0 spaces around "[" and "]"')]
    return []


def evaluate(region: BracketedRegion, mode: SpacingMode) -> List[Diagnostic]:
    """
    Check the spacing of one computed region.

    Args:
        region: Boundary tokens of a computed access
        mode: Active spacing mode

    Returns:
        Diagnostics in report order: leading boundary first, trailing second
        (at most one diagnostic in "even" mode)
    """
    if mode is SpacingMode.EVEN:
        return _evaluate_even(region)

    before, first, last, after = region.before, region.first, region.last, region.after
    must_be_spaced = mode is SpacingMode.ALWAYS
    out: List[Diagnostic] = []

    # Spacing across lines is never checked
    if is_same_line(before, first):
        if must_be_spaced:
            if not is_spaced(before, first):
                out.append(_required_beginning_space(before))
        elif is_spaced(before, first):
            out.append(_no_beginning_space(before))

    if is_same_line(last, after):
        if must_be_spaced:
            if not is_spaced(last, after):
                out.append(_required_ending_space(after))
        elif is_spaced(last, after):
            out.append(_no_ending_space(after))

    return out


class ComputedPropertySpacingRule(BaseRule):

    meta = RuleMeta(
        id=RULE_ID,
        type="layout",
        description="Disallows or enforces spaces inside computed properties.",
        docs_url="https://github.com/standard/eslint-plugin-standard#rules-explanations",
        options=tuple(m.value for m in SpacingMode),
    )

    def __init__(self, options: Union[None, str, Sequence[Any]] = None):
        super().__init__(options)
        self.mode = SpacingMode.resolve(self.options)

    def check(self, region: BracketedRegion, sink: DiagnosticsSink) -> None:
        for diagnostic in evaluate(region, self.mode):
            sink.report(diagnostic)


__all__ = ["RULE_ID", "SpacingMode", "evaluate", "is_spaced", "is_same_line", "ComputedPropertySpacingRule"]
