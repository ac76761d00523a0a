"""Text-based removal for stylesheets the structural parser rejects."""

from __future__ import annotations

import re
from typing import Iterable

from csspruner.patterns import Pattern, matches_any
from csspruner.removal.outcome import RemovalOutcome

STRATEGY = "text"

_BOUNDARY_CHARS = ",{};"


def specificity_proxy(selector: str) -> int:
    """Count of ``.`` and ``#`` characters; only used to order removals."""
    return selector.count(".") + selector.count("#")


def removal_order(selectors: Iterable[str]) -> list[str]:
    """Most specific, then longest, first so short selectors never eat into long ones."""
    return sorted(set(selectors), key=lambda s: (-specificity_proxy(s), -len(s)))


def _matching_brace(text: str, open_index: int) -> int:
    """Index of the ``}`` closing the block opened at *open_index*, or -1."""
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def _list_start(text: str, selector_start: int) -> int:
    """Start of the selector list that contains *selector_start*."""
    brace = max(text.rfind(char, 0, selector_start) for char in "{};") + 1
    comment = text.rfind("*/", 0, selector_start)
    return max(brace, comment + 2) if comment != -1 else brace


def drop_stray_braces(text: str) -> str:
    """Remove closing braces that have no matching opening brace."""
    out: list[str] = []
    depth = 0
    for char in text:
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                continue
            depth -= 1
        out.append(char)
    return "".join(out)


def normalize(text: str) -> str:
    text = re.sub(r";\s*;", ";", text)
    text = re.sub(r"\s{2,}", " ", text)
    text = drop_stray_braces(text)
    return text.strip()


class TextRemoval:
    """Remove selectors by locating them in the raw text and counting braces.

    Braces inside string literals are counted like any other brace.
    """

    def __init__(self, whitelist: Iterable[Pattern] = ()) -> None:
        self.whitelist = tuple(whitelist)

    def apply(self, css_text: str, selectors: Iterable[str]) -> RemovalOutcome:
        result = css_text
        removed = 0
        for selector in removal_order(selectors):
            if matches_any(self.whitelist, selector):
                continue
            spans = self._spans_for(result, selector)
            for start, end in sorted(spans, reverse=True):
                result = result[:start] + result[end:]
            removed += len(spans)
        if not removed:
            return RemovalOutcome.rewritten(css_text, STRATEGY, 0)
        return RemovalOutcome.rewritten(normalize(result), STRATEGY, removed)

    def _spans_for(self, text: str, selector: str) -> list[tuple[int, int]]:
        """Deletion spans for every occurrence of *selector* at a rule boundary."""
        # A closing comment marker counts as a boundary: "/* note */.gone {".
        boundary = r"(?:^|(?<=[" + re.escape(_BOUNDARY_CHARS) + r"])|(?<=\*/))"
        pattern = re.compile(boundary + r"\s*(" + re.escape(selector) + r")\s*(?=[,{])")
        spans: list[tuple[int, int]] = []
        for match in pattern.finditer(text):
            start, end = match.start(1), match.end(1)
            open_index = text.find("{", end)
            if open_index == -1:
                continue
            close_index = _matching_brace(text, open_index)
            if close_index == -1:
                continue
            floor = spans[-1][1] if spans else 0
            list_start = _list_start(text, start)
            if "," in text[list_start:open_index]:
                span = self._surgical_span(text, start, end, list_start, floor)
            else:
                span = (start, close_index + 1)
            if span[0] < floor:
                continue
            spans.append(span)
        return spans

    @staticmethod
    def _surgical_span(
        text: str, start: int, end: int, list_start: int, floor: int = 0
    ) -> tuple[int, int]:
        """Span covering the selector and one adjacent comma.

        The comma before is preferred unless it lies before *floor*, the end
        of the span already taken by an earlier occurrence.
        """
        before = re.search(r",\s*$", text[list_start:start])
        if before and list_start + before.start() >= floor:
            return list_start + before.start(), end
        after = re.match(r"\s*,\s*", text[end:])
        if after:
            return start, end + after.end()
        return start, end
