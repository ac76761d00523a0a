"""Class-usage scanner: collects class names referenced by a source tree."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from csspruner.scanner.patterns import (
    CLASSLIST_RE,
    DEFAULT_DYNAMIC_PATTERNS,
    JSX_EXPRESSION_RE,
    JSX_PATTERNS,
    OBJECT_KEY_RE,
    PLACEHOLDER_RE,
    SCRIPT_SECTION_RE,
    STATIC_PATTERNS,
    STRING_LITERAL_RE,
    TEMPLATE_SECTION_RE,
    TOKEN_RE,
    VUE_BINDING_RE,
    DynamicClassPattern,
)

__all__ = ["ClassScanner", "DEFAULT_EXTENSIONS", "EXCLUDED_DIRS", "is_valid_class_name"]

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte", ".html", ".htm",
    ".php", ".twig", ".py", ".rb", ".java", ".cs",
)

EXCLUDED_DIRS = frozenset({"node_modules", "dist", "build", ".git", "coverage"})

_COMPONENT_SUFFIXES = frozenset({".vue", ".svelte"})
_JSX_SUFFIXES = frozenset({".jsx", ".tsx"})


def is_valid_class_name(token: str) -> bool:
    return bool(TOKEN_RE.match(token))


def _split_tokens(value: str) -> list[str]:
    return [t for t in value.split() if is_valid_class_name(t)]


def _literal_tokens(value: str) -> list[str]:
    """Tokens from the literal parts of a template, ignoring ``${...}`` holes."""
    tokens: list[str] = []
    for part in PLACEHOLDER_RE.split(value):
        tokens.extend(_split_tokens(part))
    return tokens


class ClassScanner:
    """Walk source directories and collect every class name they reference.

    Extraction is purely lexical. Class names assembled at runtime from
    variables are invisible here and have to reach the whitelist instead.
    """

    def __init__(
        self,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        dynamic_patterns: Iterable[DynamicClassPattern] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.extensions = frozenset(ext.lower() for ext in extensions)
        self.dynamic_patterns: list[DynamicClassPattern] = list(DEFAULT_DYNAMIC_PATTERNS)
        self.dynamic_patterns.extend(dynamic_patterns)
        self.log = logger or logging.getLogger("csspruner.scanner")
        self.files_scanned = 0

    def add_dynamic_pattern(self, pattern: DynamicClassPattern) -> None:
        self.dynamic_patterns.append(pattern)

    # ---- directory walk ----

    def source_files(self, directories: Iterable[str | Path]) -> list[Path]:
        """Matching files under *directories*, in a stable order, without duplicates."""
        files: list[Path] = []
        seen: set[Path] = set()
        for directory in directories:
            root = Path(directory)
            if not root.is_dir():
                self.log.warning("Source directory not found: %s", root)
                continue
            for path in sorted(root.rglob("*")):
                if path.suffix.lower() not in self.extensions or not path.is_file():
                    continue
                if EXCLUDED_DIRS.intersection(path.relative_to(root).parts[:-1]):
                    continue
                key = path.resolve()
                if key not in seen:
                    seen.add(key)
                    files.append(path)
        return files

    def scan(self, directories: Iterable[str | Path]) -> set[str]:
        """Return the set of class names referenced anywhere under *directories*."""
        used: set[str] = set()
        self.files_scanned = 0
        for path in self.source_files(directories):
            try:
                content = path.read_text(encoding="utf-8", errors="ignore")
            except OSError as exc:
                self.log.warning("Could not scan file %s: %s", path, exc)
                continue
            self.files_scanned += 1
            used |= self.extract_classes(content, path)
        self.log.info("Scanned %d source files, %d class names", self.files_scanned, len(used))
        return used

    # ---- per-file extraction ----

    def extract_classes(self, content: str, path: str | Path = "") -> set[str]:
        """Run every extraction pass over one file's *content*."""
        classes = self.extract_static(content)
        classes |= self.extract_dynamic(content)
        suffix = Path(path).suffix.lower()
        if suffix in _COMPONENT_SUFFIXES:
            classes |= self.extract_component(content)
        elif suffix in _JSX_SUFFIXES:
            classes |= self.extract_jsx(content)
        return classes

    def extract_static(self, content: str) -> set[str]:
        classes: set[str] = set()
        for pattern in STATIC_PATTERNS:
            for match in pattern.finditer(content):
                classes.update(_split_tokens(match.group(1)))
        for match in CLASSLIST_RE.finditer(content):
            for literal in STRING_LITERAL_RE.finditer(match.group(1)):
                classes.update(_split_tokens(literal.group(2)))
        return classes

    def extract_dynamic(self, content: str) -> set[str]:
        classes: set[str] = set()
        for dynamic in self.dynamic_patterns:
            for match in dynamic.pattern.finditer(content):
                value = match.group(1) if match.groups() else match.group(0)
                if value:
                    classes.update(_literal_tokens(value))
        return classes

    def extract_component(self, content: str) -> set[str]:
        """Single-file components: rescan template and script sections, plus class bindings."""
        classes: set[str] = set()
        for section_re in (TEMPLATE_SECTION_RE, SCRIPT_SECTION_RE):
            section = section_re.search(content)
            if section:
                classes |= self.extract_static(section.group(1))
        for match in VUE_BINDING_RE.finditer(content):
            expression = match.group(1) if match.group(1) is not None else match.group(2)
            classes |= _expression_literals(expression)
            for key in OBJECT_KEY_RE.finditer(expression):
                classes.add(key.group(1))
        return classes

    def extract_jsx(self, content: str) -> set[str]:
        classes: set[str] = set()
        for pattern in JSX_PATTERNS:
            for match in pattern.finditer(content):
                classes.update(_split_tokens(match.group(1)))
        for match in JSX_EXPRESSION_RE.finditer(content):
            classes |= _expression_literals(match.group(1))
        return classes


def _expression_literals(expression: str) -> set[str]:
    """Class tokens found in the string literals of a JavaScript expression."""
    classes: set[str] = set()
    for literal in STRING_LITERAL_RE.finditer(expression):
        classes.update(_literal_tokens(literal.group(2)))
    return classes


def compile_dynamic_pattern(raw: str, description: str = "Configured pattern") -> DynamicClassPattern:
    """Build a :class:`DynamicClassPattern` from a regex source string."""
    source = raw[1:-1] if len(raw) >= 2 and raw.startswith("/") and raw.endswith("/") else raw
    return DynamicClassPattern(pattern=re.compile(source), description=description)
