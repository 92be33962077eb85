"""
Base class and metadata for spacing rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Tuple, Union

from ..diagnostics import DiagnosticsSink
from ..tokens import BracketedRegion


@dataclass(frozen=True)
class RuleMeta:
    id: str
    type: str
    description: str
    docs_url: str
    options: Tuple[str, ...] = ()


class BaseRule(ABC):
    """
    A rule is created once per lint session from its option list
    and then invoked once per bracketed region.
    """

    meta: ClassVar[RuleMeta]

    def __init__(self, options: Union[None, str, Sequence[Any]] = None):
        # a bare string is a single option, not a sequence of characters
        if isinstance(options, str):
            options = (options,)
        self.options: Tuple[Any, ...] = tuple(options or ())

    @property
    def id(self) -> str:
        return self.meta.id

    @abstractmethod
    def check(self, region: BracketedRegion, sink: DiagnosticsSink) -> None:
        """
        Inspect one computed region and report violations to the sink.

        Args:
            region: Boundary tokens of the region (always a computed access)
            sink: Destination for diagnostics
        """
        pass


__all__ = ["RuleMeta", "BaseRule"]
