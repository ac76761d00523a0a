"""Usage classifier: decides which selectors are used and which can go."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from csspruner.model.rule import StylesheetRule
from csspruner.model.selector import ClassifiedSelector, Verdict
from csspruner.patterns import Pattern, matches_any
from csspruner.stylesheet.tree import animation_names

__all__ = ["UsageClassifier", "class_tokens", "is_special_selector", "REASONS"]

# Lexical scan, not a selector parse: ".x" inside :not() or [attr=".x"] counts too.
_CLASS_RE = re.compile(r"\.([a-zA-Z_-][a-zA-Z0-9_-]*)")
_ELEMENT_RE = re.compile(r"^[a-z]+$", re.IGNORECASE)

REASONS: dict[Verdict, str] = {
    Verdict.WHITELISTED: "Whitelisted",
    Verdict.BLACKLISTED: "Blacklisted",
    Verdict.NOT_FOUND_IN_SOURCE: "Not found in source files",
}
FOUND_REASON = "Found in source files"
SPECIAL_REASON = "Special selector"
ANIMATION_REASON = "Referenced by animation"


def class_tokens(selector: str) -> list[str]:
    """Every ``.name`` class token appearing in *selector*."""
    return _CLASS_RE.findall(selector)


def is_special_selector(selector: str) -> bool:
    """True for selectors kept regardless of usage.

    Pseudo-classes, attribute selectors, the universal selector and bare
    element selectors are kept. Any selector containing ``html`` or
    ``body`` is kept too, including ``.my-html-widget``.
    """
    return (
        ":" in selector
        or "[" in selector
        or "*" in selector
        or "html" in selector
        or "body" in selector
        or bool(_ELEMENT_RE.match(selector.strip()))
    )


class UsageClassifier:
    """Label each extracted rule with a :class:`Verdict`.

    Order of checks:
        1. any class token of the selector is in the used set -> USED
        2. special selector                                   -> USED
        3. whitelist match                                     -> WHITELISTED
        4. blacklist match                                     -> BLACKLISTED
        5. otherwise                                           -> NOT_FOUND_IN_SOURCE

    A removable @keyframes record whose name appears in an animation
    declaration of a kept rule is kept as USED by :meth:`classify`.
    """

    def __init__(
        self,
        whitelist: Iterable[Pattern] = (),
        blacklist: Iterable[Pattern] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.whitelist = tuple(whitelist)
        self.blacklist = tuple(blacklist)
        self.log = logger or logging.getLogger("csspruner.classify")

    def is_whitelisted(self, selector: str) -> bool:
        return matches_any(self.whitelist, selector)

    def is_blacklisted(self, selector: str) -> bool:
        return matches_any(self.blacklist, selector)

    def verdict(self, rule: StylesheetRule, used: set[str]) -> ClassifiedSelector:
        selector = rule.selector
        if any(token in used for token in class_tokens(selector)):
            return ClassifiedSelector(rule, Verdict.USED, FOUND_REASON)
        if is_special_selector(selector):
            return ClassifiedSelector(rule, Verdict.USED, SPECIAL_REASON)
        if self.is_whitelisted(selector):
            verdict = Verdict.WHITELISTED
        elif self.is_blacklisted(selector):
            verdict = Verdict.BLACKLISTED
        else:
            verdict = Verdict.NOT_FOUND_IN_SOURCE
        return ClassifiedSelector(rule, verdict, REASONS[verdict])

    def classify(
        self, rules: Iterable[StylesheetRule], used: set[str]
    ) -> tuple[list[ClassifiedSelector], list[ClassifiedSelector]]:
        """Split *rules* into ``(kept, removable)`` lists, preserving input order."""
        results = [self.verdict(rule, used) for rule in rules]
        animated = _animated_names(results)
        kept: list[ClassifiedSelector] = []
        removable: list[ClassifiedSelector] = []
        for classified in results:
            rule = classified.rule
            if not classified.is_used and rule.is_keyframes and _unquote(rule.keyframe) in animated:
                classified = ClassifiedSelector(rule, Verdict.USED, ANIMATION_REASON)
            if classified.is_used:
                kept.append(classified)
            else:
                removable.append(classified)
                self.log.debug(
                    "%s:%d: %s -> %s", rule.source_file, rule.line, rule.selector, classified.reason
                )
        return kept, removable


def _unquote(name: str) -> str:
    return name.strip("\"'")


def _animated_names(results: list[ClassifiedSelector]) -> set[str]:
    """Animation names referenced by the rules that stay in the stylesheet."""
    names: set[str] = set()
    seen: set[str] = set()
    for classified in results:
        declarations = classified.rule.declarations
        if not classified.is_used or classified.rule.is_keyframes or declarations in seen:
            continue
        seen.add(declarations)
        names |= animation_names(declarations)
    return names
