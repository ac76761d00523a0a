"""Pruner configuration: values, defaults, JSON loading and validation."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from csspruner.errors import ConfigError, PatternSyntaxError
from csspruner.patterns import Pattern, compile_patterns
from csspruner.scanner import DEFAULT_EXTENSIONS, DynamicClassPattern, compile_dynamic_pattern

CONFIG_FILES = ("css-pruner.config.json", ".css-prunerrc", ".css-prunerrc.json")

REPORT_FORMATS = ("console", "json")

# Common utility and state classes that are usually toggled at runtime.
DEFAULT_WHITELIST: tuple[str, ...] = (
    "sr-only",
    "visually-hidden",
    "clearfix",
    r"/^\.wp-/",
    r"/^\.woocommerce-/",
    r"/^\.is-/",
    r"/^\.has-/",
    r"/^\.js-/",
)

# camelCase keys used by config files written for other tools in the pipeline.
_KEY_ALIASES = {
    "cssFiles": "css_files",
    "sourceDirectories": "source_directories",
    "dynamicClassPatterns": "dynamic_class_patterns",
    "fileExtensions": "file_extensions",
    "reportFormat": "report_format",
    "outputFile": "output_file",
}


@dataclass(frozen=True)
class PrunerConfig:
    css_files: tuple[str, ...] = ()
    source_directories: tuple[str, ...] = ("src",)
    whitelist: tuple[Pattern, ...] = compile_patterns(DEFAULT_WHITELIST)
    blacklist: tuple[Pattern, ...] = ()
    dynamic_class_patterns: tuple[DynamicClassPattern, ...] = ()
    file_extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    report_format: str = "console"
    output_file: str | None = None

    def __post_init__(self) -> None:
        # Library callers may pass raw entries; a malformed regex fails here.
        object.__setattr__(self, "whitelist", compile_patterns(self.whitelist))
        object.__setattr__(self, "blacklist", compile_patterns(self.blacklist))
        if self.report_format not in REPORT_FORMATS:
            raise ConfigError(
                f"reportFormat must be one of: {', '.join(REPORT_FORMATS)} "
                f"(got {self.report_format!r})"
            )
        bad = [ext for ext in self.file_extensions if not ext.startswith(".")]
        if bad:
            raise ConfigError(f"fileExtensions must start with a dot (e.g. '.js'): {bad}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PrunerConfig:
        """Build a config from a JSON-style mapping, compiling every pattern.

        Raises :class:`PatternSyntaxError` for a malformed regex and
        :class:`ConfigError` for unknown keys or invalid values.
        """
        values: dict[str, Any] = {}
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown configuration key: {key!r}")
            values[name] = value

        for name in ("css_files", "source_directories", "file_extensions"):
            if name in values:
                values[name] = tuple(_string_list(name, values[name]))
        for name in ("whitelist", "blacklist"):
            if name in values:
                values[name] = compile_patterns(_string_list(name, values[name]))
        if "dynamic_class_patterns" in values:
            values["dynamic_class_patterns"] = tuple(
                _dynamic_pattern(raw)
                for raw in _string_list("dynamic_class_patterns", values["dynamic_class_patterns"])
            )
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping using the camelCase keys config files use."""
        return {
            "cssFiles": list(self.css_files),
            "sourceDirectories": list(self.source_directories),
            "whitelist": [str(p) for p in self.whitelist],
            "blacklist": [str(p) for p in self.blacklist],
            "dynamicClassPatterns": [f"/{p.pattern.pattern}/" for p in self.dynamic_class_patterns],
            "fileExtensions": list(self.file_extensions),
            "reportFormat": self.report_format,
            "outputFile": self.output_file,
        }

    def with_overrides(self, **changes: Any) -> PrunerConfig:
        """Return a copy with every non-None value in *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _string_list(name: str, value: Any) -> list[str]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigError(f"{name} must be a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"{name} entries must be strings, got {item!r}")
    return list(value)


def _dynamic_pattern(raw: str) -> DynamicClassPattern:
    try:
        return compile_dynamic_pattern(raw)
    except re.error as exc:
        raise PatternSyntaxError(raw, str(exc)) from exc


def find_config_file(directory: str | Path = ".") -> Path | None:
    for name in CONFIG_FILES:
        candidate = Path(directory) / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: str | Path | None = None, directory: str | Path = ".") -> PrunerConfig:
    """Load configuration from *path*, or from the first known file in *directory*.

    Returns the defaults when no path is given and no file is found.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Configuration file not found: {config_path}")
    else:
        found = find_config_file(directory)
        if found is None:
            return PrunerConfig()
        config_path = found

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not load {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")
    return PrunerConfig.from_dict(data)


def sample_config() -> PrunerConfig:
    return PrunerConfig(
        css_files=("dist/styles.css",),
        source_directories=("src",),
        whitelist=compile_patterns(DEFAULT_WHITELIST),
    )


def write_sample_config(path: str | Path) -> Path:
    """Write a starter configuration file to *path* and return it."""
    target = Path(path)
    target.write_text(json.dumps(sample_config().to_dict(), indent=2) + "\n", encoding="utf-8")
    return target
