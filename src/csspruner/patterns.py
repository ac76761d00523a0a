"""Whitelist/blacklist patterns: literal substrings or ``/regex/`` entries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union

from csspruner.errors import PatternSyntaxError

__all__ = [
    "LiteralPattern",
    "RegexPattern",
    "Pattern",
    "compile_pattern",
    "compile_patterns",
    "matches_any",
]


@dataclass(frozen=True)
class LiteralPattern:
    """Matches any selector containing ``text``."""

    text: str

    def matches(self, selector: str) -> bool:
        return self.text in selector

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RegexPattern:
    """Matches any selector the compiled regex finds a match in."""

    regex: re.Pattern[str]

    def matches(self, selector: str) -> bool:
        return self.regex.search(selector) is not None

    def __str__(self) -> str:
        return f"/{self.regex.pattern}/"


Pattern = Union[LiteralPattern, RegexPattern]


def compile_pattern(raw: str | re.Pattern[str] | Pattern) -> Pattern:
    """Turn a raw configuration entry into a :data:`Pattern`.

    Strings wrapped in slashes (``/^is-/``) are compiled as regular
    expressions; any other string is a literal substring test. Compiled
    ``re.Pattern`` objects and already-built patterns pass through.
    """
    if isinstance(raw, (LiteralPattern, RegexPattern)):
        return raw
    if isinstance(raw, re.Pattern):
        return RegexPattern(raw)
    if not isinstance(raw, str):
        raise PatternSyntaxError(repr(raw), "pattern must be a string")
    if len(raw) >= 2 and raw.startswith("/") and raw.endswith("/"):
        try:
            return RegexPattern(re.compile(raw[1:-1]))
        except re.error as exc:
            raise PatternSyntaxError(raw, str(exc)) from exc
    return LiteralPattern(raw)


def compile_patterns(raws: Iterable[str | re.Pattern[str] | Pattern]) -> tuple[Pattern, ...]:
    return tuple(compile_pattern(raw) for raw in raws)


def matches_any(patterns: Iterable[Pattern], selector: str) -> bool:
    """Return True if any of *patterns* matches *selector*."""
    return any(p.matches(selector) for p in patterns)
