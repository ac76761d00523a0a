"""Classification verdicts attached to extracted rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from csspruner.model.rule import StylesheetRule


class Verdict(Enum):
    """Why a selector is kept or removed."""

    USED = "used"
    WHITELISTED = "whitelisted"
    BLACKLISTED = "blacklisted"
    NOT_FOUND_IN_SOURCE = "not_found_in_source"

    @property
    def removable(self) -> bool:
        return self in (Verdict.BLACKLISTED, Verdict.NOT_FOUND_IN_SOURCE)


@dataclass(frozen=True)
class ClassifiedSelector:
    """A StylesheetRule paired with its verdict and a human-readable reason."""

    rule: StylesheetRule
    verdict: Verdict
    reason: str = ""

    @property
    def selector(self) -> str:
        return self.rule.selector

    @property
    def file(self) -> str:
        return self.rule.source_file

    @property
    def line(self) -> int:
        return self.rule.line

    @property
    def column(self) -> int:
        return self.rule.column

    @property
    def size(self) -> int:
        return self.rule.size

    @property
    def is_used(self) -> bool:
        return not self.verdict.removable

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "selector": self.selector,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "size": self.size,
            "reason": self.reason,
        }
        if self.rule.media:
            data["media"] = self.rule.media
        if self.rule.keyframe:
            data["keyframe"] = self.rule.keyframe
        return data
