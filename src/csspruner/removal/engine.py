"""Safe removal engine: structural removal with a text fallback."""

from __future__ import annotations

import logging
from typing import Iterable, Union

from csspruner.model.selector import ClassifiedSelector
from csspruner.patterns import Pattern
from csspruner.removal.outcome import RemovalOutcome
from csspruner.removal.structural import StructuralRemoval
from csspruner.removal.text import TextRemoval

SelectorLike = Union[ClassifiedSelector, str]


def bytes_saved(before: str, after: str) -> int:
    """UTF-8 byte delta between two versions of a stylesheet."""
    return len(before.encode("utf-8")) - len(after.encode("utf-8"))


class RemovalEngine:
    """Rewrite stylesheet text without the given selectors.

    The structural strategy runs first. Only a PARSE_FAILED outcome routes
    to the text strategy; any other exception propagates.
    """

    def __init__(
        self,
        whitelist: Iterable[Pattern] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.whitelist = tuple(whitelist)
        self.structural = StructuralRemoval(self.whitelist)
        self.text = TextRemoval(self.whitelist)
        self.log = logger or logging.getLogger("csspruner.removal")

    def remove_with_outcome(self, css_text: str, selectors: Iterable[SelectorLike]) -> RemovalOutcome:
        targets = [s.selector if isinstance(s, ClassifiedSelector) else s for s in selectors]
        outcome = self.structural.apply(css_text, targets)
        if outcome.parse_failed:
            error = outcome.error
            self.log.warning(
                "Could not parse CSS structurally (line %s, column %s: %s); "
                "falling back to text removal",
                error.line if error else None,
                error.column if error else None,
                error,
            )
            outcome = self.text.apply(css_text, targets)
        self.log.debug("%s removal dropped %d selector(s)", outcome.strategy, outcome.removed)
        return outcome

    def remove(self, css_text: str, selectors: Iterable[SelectorLike]) -> str:
        return self.remove_with_outcome(css_text, selectors).text
