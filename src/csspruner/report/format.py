"""Small formatting helpers shared by the reporters."""

from __future__ import annotations

from collections import defaultdict

from csspruner.model.selector import ClassifiedSelector

_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(size: int) -> str:
    """Human-readable byte count: ``0 B``, ``512 B``, ``1.5 KB``."""
    if size <= 0:
        return "0 B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.1f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit]}"


def group_by_file(selectors: list[ClassifiedSelector]) -> dict[str, list[ClassifiedSelector]]:
    grouped: dict[str, list[ClassifiedSelector]] = defaultdict(list)
    for selector in selectors:
        grouped[selector.file].append(selector)
    return dict(grouped)
