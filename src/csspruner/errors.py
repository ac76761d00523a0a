"""Error types raised by the pruner."""

from __future__ import annotations


class PrunerError(Exception):
    """Base class for all csspruner errors."""


class ConfigError(PrunerError):
    """Raised when a configuration file or value is invalid."""


class PatternSyntaxError(ConfigError):
    """Raised when a whitelist, blacklist or dynamic pattern is not a valid regex."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class FileReadError(PrunerError):
    """Raised when a stylesheet or source file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class FileWriteError(PrunerError):
    """Raised when a cleaned stylesheet or its backup cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write {path}: {reason}")


class StructuralParseError(PrunerError):
    """Raised when stylesheet text cannot be parsed into a rule tree."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
