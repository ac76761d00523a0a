"""Stylesheet rule model: one record per selector of a parsed rule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StylesheetRule:
    """A single selector extracted from a stylesheet.

    A rule ``.a, .b { color: red }`` produces two records that share
    ``declarations``, ``line`` and ``column``. A ``@keyframes`` block
    produces one synthetic record whose selector is ``"@keyframes <name>"``.

    Attributes:
        selector: The trimmed selector text.
        declarations: The serialized declaration block, without braces.
        source_file: Path of the stylesheet the rule was read from.
        line: 1-based line of the rule's selector start, 0 if unknown.
        column: 1-based column of the rule's selector start, 0 if unknown.
        size: UTF-8 byte length of ``selector + declarations``.
        media: The enclosing ``@media`` condition, if any.
        keyframe: The animation name for synthetic keyframes records.
    """

    selector: str
    declarations: str
    source_file: str
    line: int = 0
    column: int = 0
    size: int = 0
    media: str | None = None
    keyframe: str | None = None

    @property
    def is_keyframes(self) -> bool:
        return self.keyframe is not None


def rule_size(selector: str, declarations: str) -> int:
    """Byte size charged to a rule: UTF-8 length of selector plus declarations."""
    return len(f"{selector}{declarations}".encode("utf-8"))
