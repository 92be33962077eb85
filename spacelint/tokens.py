"""
Token and bracketed-region value types.

Tokens are produced by the source layer (tree-sitter); rules only read
their ranges and positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RegionKind = Literal["member", "property"]


@dataclass(frozen=True)
class Position:
    """Source position: 1-based line, 0-based character column."""
    line: int
    column: int


@dataclass(frozen=True)
class Token:
    """
    Immutable span of source text.

    `start`/`end` are character offsets of the half-open range [start, end).
    Lines are 1-based, columns are 0-based and counted in characters.
    """
    text: str
    start: int
    end: int
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @property
    def start_position(self) -> Position:
        return Position(self.start_line, self.start_column)


@dataclass(frozen=True)
class BracketedRegion:
    """
    The four boundary tokens of one computed access.

    before: token before the inner expression ("[" or the innermost "(")
    first:  first token of the inner expression
    last:   last token of the inner expression
    after:  token after the inner expression ("]" or the innermost ")")
    node:   start of the owning member access / property definition
    """
    kind: RegionKind
    node: Position
    before: Token
    first: Token
    last: Token
    after: Token


__all__ = ["Position", "Token", "BracketedRegion", "RegionKind"]
