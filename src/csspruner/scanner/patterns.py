"""Regex families used to find class names in source files."""

from __future__ import annotations

import re
from dataclasses import dataclass

# A class name we are willing to match against selectors.
TOKEN_RE = re.compile(r"^[A-Za-z_-][A-Za-z0-9_-]*$")

# Template-literal interpolation placeholder: ``${expr}``.
PLACEHOLDER_RE = re.compile(r"\$\{[^}]+\}")

# Quoted string literal of any JavaScript flavor.
STRING_LITERAL_RE = re.compile(r"""(["'`])((?:(?!\1).)*)\1""", re.DOTALL)

STATIC_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"""class(?:Name)?=["']([^"']*)["']"""),
    re.compile(r"""class(?:Name)?=\{["']([^"']*)["']\}"""),
    re.compile(r"""class(?:Name)?=\{`([^`]*)`\}"""),
    re.compile(r"@apply\s+([^;\n]+)"),
)

# classList.add('a', 'b') / classList.toggle('open', flag): every string argument.
CLASSLIST_RE = re.compile(r"classList\.(?:add|toggle)\(([^)]*)\)")

JSX_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"""className=["']([^"']*)["']"""),
    re.compile(r"""className=\{["']([^"']*)["']\}"""),
    re.compile(r"""className=\{`([^`]*)`\}"""),
)

# className={cond ? 'a' : 'b'}: only string literals inside are read.
JSX_EXPRESSION_RE = re.compile(r"className=\{([^}]+)\}")

TEMPLATE_SECTION_RE = re.compile(r"<template[^>]*>([\s\S]*?)</template>", re.IGNORECASE)
SCRIPT_SECTION_RE = re.compile(r"<script[^>]*>([\s\S]*?)</script>", re.IGNORECASE)

# Vue class bindings: :class="{ active: isActive, 'text-danger': hasError }".
VUE_BINDING_RE = re.compile(r"""(?:v-bind)?:class=(?:"([^"]*)"|'([^']*)')""")
OBJECT_KEY_RE = re.compile(r"""(?:^|[{,])\s*([A-Za-z_-][A-Za-z0-9_-]*)\s*:""")


@dataclass(frozen=True)
class DynamicClassPattern:
    """A regex whose first group captures a (possibly interpolated) class list."""

    pattern: re.Pattern[str]
    description: str
    framework: str = "custom"


DEFAULT_DYNAMIC_PATTERNS: tuple[DynamicClassPattern, ...] = (
    DynamicClassPattern(
        pattern=re.compile(r"""class(?:Name)?=["'`]([^"'`]*\$\{[^}]+\}[^"'`]*)["'`]"""),
        description="Template literal class names",
        framework="tailwind",
    ),
    DynamicClassPattern(
        pattern=re.compile(r"class(?:Name)?=\{`([^`]*\$\{[^`]*)`\}"),
        description="Braced template literal class names",
        framework="tailwind",
    ),
    DynamicClassPattern(
        pattern=re.compile(
            r"""class(?:Name)?=["'`]([^"'`]*(?:bg|text|border|p|m|w|h)-\[[^\]]+\][^"'`]*)["'`]"""
        ),
        description="Tailwind arbitrary values",
        framework="tailwind",
    ),
    DynamicClassPattern(
        pattern=re.compile(r"styled\.[a-zA-Z]+`([^`]*)`"),
        description="Styled-components",
    ),
    DynamicClassPattern(
        pattern=re.compile(r"css`([^`]*)`"),
        description="CSS template literals",
    ),
)
