"""
Diagnostic values and the sink rules write them to.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional, Protocol

from .tokens import Position


@dataclass(frozen=True)
class Diagnostic:
    rule_id: str
    message: str
    line: int
    column: int  # 0-based, rendered 1-based
    path: Optional[Path] = None

    @classmethod
    def at(cls, rule_id: str, position: Position, message: str) -> Diagnostic:
        return cls(rule_id=rule_id, message=message, line=position.line, column=position.column)

    def with_path(self, path: Optional[Path]) -> Diagnostic:
        return replace(self, path=path)


class DiagnosticsSink(Protocol):
    """Receives diagnostics as soon as a rule detects them."""

    def report(self, diagnostic: Diagnostic) -> None:
        ...


@dataclass
class DiagnosticCollector:
    """List-backed sink."""
    items: List[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def sorted(self) -> List[Diagnostic]:
        # stable: diagnostics of one region keep their emission order
        return sorted(self.items, key=lambda d: (d.line, d.column))


__all__ = ["Diagnostic", "DiagnosticsSink", "DiagnosticCollector"]
