"""Typed result of a removal strategy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from csspruner.errors import StructuralParseError


class RemovalStatus(Enum):
    REWRITTEN = "rewritten"
    PARSE_FAILED = "parse_failed"


@dataclass(frozen=True)
class RemovalOutcome:
    """What a strategy did with a stylesheet.

    ``text`` is the rewritten stylesheet for REWRITTEN outcomes and the
    untouched input for PARSE_FAILED ones.
    """

    status: RemovalStatus
    text: str
    strategy: str
    removed: int = 0
    error: StructuralParseError | None = None

    @property
    def parse_failed(self) -> bool:
        return self.status is RemovalStatus.PARSE_FAILED

    @classmethod
    def rewritten(cls, text: str, strategy: str, removed: int) -> RemovalOutcome:
        return cls(status=RemovalStatus.REWRITTEN, text=text, strategy=strategy, removed=removed)

    @classmethod
    def failed(cls, text: str, strategy: str, error: StructuralParseError) -> RemovalOutcome:
        return cls(status=RemovalStatus.PARSE_FAILED, text=text, strategy=strategy, error=error)
