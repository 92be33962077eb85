"""
spacelint: spacing checks for computed property access.
"""

from __future__ import annotations

from .diagnostics import Diagnostic, DiagnosticCollector, DiagnosticsSink
from .engine import build_rules, lint_paths, lint_text
from .tokens import BracketedRegion, Position, Token

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticsSink",
    "BracketedRegion",
    "Position",
    "Token",
    "build_rules",
    "lint_text",
    "lint_paths",
]
