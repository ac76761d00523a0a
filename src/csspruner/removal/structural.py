"""Structural removal: delete unused rules by editing the tinycss2 tree."""

from __future__ import annotations

from typing import Iterable

import tinycss2
from tinycss2.ast import AtRule, Node, QualifiedRule

from csspruner.errors import StructuralParseError
from csspruner.patterns import Pattern, matches_any
from csspruner.removal.outcome import RemovalOutcome
from csspruner.stylesheet.tree import (
    first_parse_error,
    is_group,
    is_keyframes,
    keyframes_selector,
    parse_block,
    parse_rules,
    prelude_text,
    split_selector_list,
)

STRATEGY = "structural"


def _strip_whitespace(tokens: list[Node], leading: bool) -> list[Node]:
    tokens = list(tokens)
    if leading:
        while tokens and tokens[0].type == "whitespace":
            tokens.pop(0)
    while tokens and tokens[-1].type == "whitespace":
        tokens.pop()
    return tokens


def _trailing_whitespace(tokens: list[Node]) -> list[Node]:
    trailing: list[Node] = []
    for token in reversed(tokens):
        if token.type != "whitespace":
            break
        trailing.insert(0, token)
    return trailing


def _error_from(node: Node) -> StructuralParseError:
    return StructuralParseError(node.message, line=node.source_line, column=node.source_column)


class StructuralRemoval:
    """Remove selectors from a parsed stylesheet tree.

    A selector list loses only its unused members; a rule whose every member
    is unused is deleted outright. ``@media`` and the other group rules are
    walked recursively and dropped once emptied. ``@keyframes`` blocks are
    removed as a whole when their synthetic ``@keyframes <name>`` selector
    is targeted, and never touched when the whitelist protects them.
    """

    def __init__(self, whitelist: Iterable[Pattern] = ()) -> None:
        self.whitelist = tuple(whitelist)

    def apply(self, css_text: str, selectors: Iterable[str]) -> RemovalOutcome:
        targets = set(selectors)
        nodes = parse_rules(css_text)
        error = first_parse_error(nodes)
        if error is not None:
            return RemovalOutcome.failed(css_text, STRATEGY, _error_from(error))
        try:
            kept, removed = self._prune(nodes, targets)
        except StructuralParseError as exc:
            return RemovalOutcome.failed(css_text, STRATEGY, exc)
        if not removed:
            return RemovalOutcome.rewritten(css_text, STRATEGY, 0)
        return RemovalOutcome.rewritten(tinycss2.serialize(kept), STRATEGY, removed)

    # ---- whitelist checks ----

    def _is_whitelisted(self, selector: str) -> bool:
        return matches_any(self.whitelist, selector)

    def _keyframes_preserved(self, node: AtRule) -> bool:
        name = prelude_text(node)
        candidates = [keyframes_selector(node), f"@{node.at_keyword}", "@keyframes"]
        if name:
            candidates.extend([name, f"@keyframes {name}"])
        return any(self._is_whitelisted(c) for c in candidates)

    # ---- tree walk ----

    def _prune(self, nodes: list[Node], targets: set[str]) -> tuple[list[Node], int]:
        """Return the surviving nodes and how many selectors were removed."""
        kept: list[Node] = []
        removed = 0
        drop_whitespace = False
        for node in nodes:
            if drop_whitespace and node.type == "whitespace":
                drop_whitespace = False
                continue
            drop_whitespace = False

            if node.type == "error":
                raise _error_from(node)

            if is_keyframes(node):
                if not self._keyframes_preserved(node) and keyframes_selector(node) in targets:
                    removed += 1
                    drop_whitespace = True
                    continue
            elif is_group(node):
                children, count = self._prune(parse_block(node), targets)
                if count:
                    removed += count
                    if not any(c.type in ("qualified-rule", "at-rule") for c in children):
                        drop_whitespace = True
                        continue
                    node.content = children
            elif node.type == "qualified-rule":
                error = first_parse_error(node.prelude)
                if error is not None:
                    raise _error_from(error)
                count, emptied = self._prune_rule(node, targets)
                removed += count
                if emptied:
                    drop_whitespace = True
                    continue

            kept.append(node)
        return kept, removed

    def _prune_rule(self, rule: QualifiedRule, targets: set[str]) -> tuple[int, bool]:
        """Cut targeted selectors out of *rule*; report (count, rule_now_empty)."""
        segments = split_selector_list(rule.prelude)
        texts = [tinycss2.serialize(segment).strip() for segment in segments]
        drop = [text in targets and not self._is_whitelisted(text) for text in texts]
        count = sum(drop)
        if not count:
            return 0, False
        keep = [bool(text) and not dropped for text, dropped in zip(texts, drop)]
        if not any(keep):
            return count, True

        comma = next(t for t in rule.prelude if t.type == "literal" and t.value == ",")
        prelude: list[Node] = []
        for segment, keep_it in zip(segments, keep):
            if not keep_it:
                continue
            if prelude:
                prelude.append(comma)
            prelude.extend(_strip_whitespace(segment, leading=not prelude))
        prelude.extend(_trailing_whitespace(segments[-1]))
        rule.prelude = prelude
        return count, False
