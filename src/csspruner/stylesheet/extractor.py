"""Rule extractor: flattens stylesheet text into per-selector records.

Tokenizing and grammar work is done by tinycss2. The extractor only walks
the resulting tree:

    .a, .b { color: red }            -> ".a", ".b"
    @media print { .c { ... } }      -> ".c" with media="print"
    @keyframes spin { 0% {} 100% {} } -> "@keyframes spin" (steps are not records)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import tinycss2
from tinycss2.ast import AtRule, Node, QualifiedRule

from csspruner.errors import FileReadError
from csspruner.model.rule import StylesheetRule, rule_size
from csspruner.stylesheet.tree import (
    first_parse_error,
    is_group,
    is_keyframes,
    keyframes_selector,
    parse_block,
    parse_rules,
    prelude_text,
    selector_texts,
)

__all__ = ["RuleExtractor", "extract_rules", "read_stylesheet"]


class RuleExtractor:
    """Extract :class:`StylesheetRule` records from stylesheet text."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.log = logger or logging.getLogger("csspruner.stylesheet")

    def extract(self, css_text: str, file_path: str | Path) -> list[StylesheetRule]:
        """Return every selector record of *css_text* in source order.

        Never raises: a failure while walking the tree is logged and yields
        no records for this file.
        """
        path = str(file_path)
        try:
            rules: list[StylesheetRule] = []
            self._walk(parse_rules(css_text), path, None, rules)
            return rules
        except Exception as exc:
            self.log.warning("Could not parse CSS in %s: %s", path, exc)
            return []

    def extract_files(self, paths: Iterable[str | Path]) -> list[StylesheetRule]:
        """Read and extract every stylesheet in *paths*, skipping unreadable ones."""
        rules: list[StylesheetRule] = []
        for path in paths:
            try:
                text = read_stylesheet(path)
            except FileReadError as exc:
                self.log.warning("%s", exc)
                continue
            rules.extend(self.extract(text, path))
        return rules

    # ---- tree walk ----

    def _walk(
        self,
        nodes: list[Node],
        path: str,
        media: str | None,
        out: list[StylesheetRule],
    ) -> None:
        for node in nodes:
            if node.type == "qualified-rule":
                out.extend(self._rule_records(node, path, media))
            elif node.type == "error":
                self.log.debug(
                    "%s:%s:%s: %s", path, node.source_line, node.source_column, node.message
                )
            elif is_keyframes(node):
                out.append(self._keyframes_record(node, path, media))
            elif is_group(node):
                inner_media = prelude_text(node) if node.lower_at_keyword == "media" else media
                self._walk(parse_block(node), path, inner_media, out)

    def _rule_records(
        self, node: QualifiedRule, path: str, media: str | None
    ) -> list[StylesheetRule]:
        # A stray "}" is folded into the prelude of the rule that follows it.
        error = first_parse_error(node.prelude)
        if error is not None:
            self.log.debug(
                "%s:%s:%s: %s", path, error.source_line, error.source_column, error.message
            )
            return []
        declarations = tinycss2.serialize(node.content).strip()
        line = node.source_line or 0
        column = node.source_column or 0
        return [
            StylesheetRule(
                selector=selector,
                declarations=declarations,
                source_file=path,
                line=line,
                column=column,
                size=rule_size(selector, declarations),
                media=media,
            )
            for selector in selector_texts(node)
        ]

    def _keyframes_record(self, node: AtRule, path: str, media: str | None) -> StylesheetRule:
        selector = keyframes_selector(node)
        declarations = tinycss2.serialize(node.content or []).strip()
        return StylesheetRule(
            selector=selector,
            declarations=declarations,
            source_file=path,
            line=node.source_line or 0,
            column=node.source_column or 0,
            size=rule_size(selector, declarations),
            media=media,
            keyframe=prelude_text(node),
        )


def read_stylesheet(path: str | Path) -> str:
    """Read a stylesheet as UTF-8, raising :class:`FileReadError` on failure."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(str(path), str(exc)) from exc


def extract_rules(
    css_text: str, file_path: str | Path, logger: logging.Logger | None = None
) -> list[StylesheetRule]:
    """Convenience wrapper around :meth:`RuleExtractor.extract`."""
    return RuleExtractor(logger=logger).extract(css_text, file_path)
