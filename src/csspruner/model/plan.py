"""Removal plan: removable selectors grouped by the stylesheet they live in."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from csspruner.model.selector import ClassifiedSelector


@dataclass
class RemovalPlan:
    """Selectors scheduled for removal, keyed by source file.

    Files keep the order in which their first selector was added.
    """

    by_file: dict[str, list[ClassifiedSelector]] = field(default_factory=dict)

    @classmethod
    def from_selectors(cls, selectors: Iterable[ClassifiedSelector]) -> RemovalPlan:
        plan = cls()
        for selector in selectors:
            plan.add(selector)
        return plan

    def add(self, selector: ClassifiedSelector) -> None:
        if not selector.verdict.removable:
            raise ValueError(f"Selector {selector.selector!r} is not removable")
        self.by_file.setdefault(selector.file, []).append(selector)

    def files(self) -> list[str]:
        return list(self.by_file)

    def selectors_for(self, path: str) -> list[ClassifiedSelector]:
        return list(self.by_file.get(path, []))

    def __iter__(self) -> Iterator[tuple[str, list[ClassifiedSelector]]]:
        return iter(self.by_file.items())

    def __len__(self) -> int:
        return sum(len(v) for v in self.by_file.values())

    def __bool__(self) -> bool:
        return bool(self.by_file)
