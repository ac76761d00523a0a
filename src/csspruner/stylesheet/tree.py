"""Helpers over the tinycss2 node tree shared by extraction and removal."""

from __future__ import annotations

from typing import Iterable

import tinycss2
from tinycss2.ast import AtRule, Node, ParseError, QualifiedRule

# Conditional group rules whose blocks hold ordinary style rules.
GROUP_AT_RULES = frozenset(
    {"media", "supports", "container", "layer", "document", "-moz-document", "scope"}
)

_ANIMATION_PROPERTIES = frozenset({"animation", "animation-name"})


def parse_rules(css_text: str) -> list[Node]:
    """Parse stylesheet text, keeping whitespace and comments for round-trips."""
    return tinycss2.parse_stylesheet(css_text, skip_comments=False, skip_whitespace=False)


def parse_block(at_rule: AtRule) -> list[Node]:
    """Parse the ``{}`` content of a group at-rule into a rule list."""
    if not at_rule.content:
        return []
    return tinycss2.parse_rule_list(at_rule.content, skip_comments=False, skip_whitespace=False)


def is_group(node: Node) -> bool:
    return (
        node.type == "at-rule"
        and node.lower_at_keyword in GROUP_AT_RULES
        and node.content is not None
    )


def is_keyframes(node: Node) -> bool:
    # Covers vendor-prefixed forms such as @-webkit-keyframes.
    return node.type == "at-rule" and node.lower_at_keyword.endswith("keyframes")


def prelude_text(node: AtRule | QualifiedRule) -> str:
    return tinycss2.serialize(node.prelude).strip()


def keyframes_selector(node: AtRule) -> str:
    """Synthetic selector for a keyframes block, e.g. ``@keyframes spin``."""
    name = prelude_text(node)
    keyword = f"@{node.at_keyword}"
    return f"{keyword} {name}" if name else keyword


def split_selector_list(prelude: list[Node]) -> list[list[Node]]:
    """Split a rule prelude on its top-level commas.

    Commas nested in ``:is(...)`` or ``[attr="a,b"]`` live inside function,
    bracket or string tokens and never split the list.
    """
    segments: list[list[Node]] = [[]]
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            segments.append([])
        else:
            segments[-1].append(token)
    return segments


def selector_texts(rule: QualifiedRule) -> list[str]:
    """Trimmed text of every selector in a rule's selector list."""
    texts = []
    for segment in split_selector_list(rule.prelude):
        text = tinycss2.serialize(segment).strip()
        if text:
            texts.append(text)
    return texts


def first_parse_error(nodes: Iterable[Node]) -> ParseError | None:
    for node in nodes:
        if node.type == "error":
            return node
    return None


def animation_names(declarations: str) -> set[str]:
    """Names referenced by ``animation`` and ``animation-name`` declarations.

    Vendor-prefixed properties count. Keywords and durations sharing the
    shorthand are returned as well; callers compare against known names.
    """
    names: set[str] = set()
    nodes = tinycss2.parse_blocks_contents(declarations, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        if node.type != "declaration":
            continue
        name = node.lower_name
        if name.startswith("-"):
            name = name.split("-", 2)[-1]
        if name in _ANIMATION_PROPERTIES:
            names.update(t.value for t in node.value if t.type in ("ident", "string"))
    return names
