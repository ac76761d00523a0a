"""Result shapes returned by ``analyze`` and ``clean``."""

from __future__ import annotations

from dataclasses import dataclass, field

from csspruner.model.selector import ClassifiedSelector


@dataclass
class AnalysisStats:
    total_css_files: int = 0
    total_source_files: int = 0
    total_selectors: int = 0
    used_selectors: int = 0
    unused_selectors: int = 0
    total_size: int = 0
    duration_ms: int = 0

    @property
    def usage_rate(self) -> float:
        """Percentage of selectors kept, 0.0 when there are none."""
        if not self.total_selectors:
            return 0.0
        return self.used_selectors / self.total_selectors * 100

    def to_dict(self) -> dict[str, int]:
        return {
            "totalCSSFiles": self.total_css_files,
            "totalSourceFiles": self.total_source_files,
            "totalSelectors": self.total_selectors,
            "usedSelectors": self.used_selectors,
            "unusedSelectors": self.unused_selectors,
            "totalSize": self.total_size,
            "durationMs": self.duration_ms,
        }


@dataclass
class AnalysisResult:
    """Outcome of classifying every selector of a stylesheet batch."""

    unused_selectors: list[ClassifiedSelector] = field(default_factory=list)
    used_selectors: list[ClassifiedSelector] = field(default_factory=list)
    potential_savings: int = 0
    stats: AnalysisStats = field(default_factory=AnalysisStats)

    def to_dict(self) -> dict[str, object]:
        return {
            "unusedSelectors": [s.to_dict() for s in self.unused_selectors],
            "usedSelectors": [
                {"selector": s.selector, "file": s.file, "reason": s.reason}
                for s in self.used_selectors
            ],
            "potentialSavings": self.potential_savings,
            "stats": self.stats.to_dict(),
        }


@dataclass
class CleanResult:
    """Outcome of rewriting stylesheets with their unused rules removed."""

    removed_selectors: list[ClassifiedSelector] = field(default_factory=list)
    bytes_saved: int = 0
    modified_files: list[str] = field(default_factory=list)
    backup_files: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "removedSelectors": [s.to_dict() for s in self.removed_selectors],
            "bytesSaved": self.bytes_saved,
            "modifiedFiles": list(self.modified_files),
            "backupFiles": list(self.backup_files),
        }
