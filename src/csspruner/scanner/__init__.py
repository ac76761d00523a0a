from csspruner.scanner.patterns import DEFAULT_DYNAMIC_PATTERNS, DynamicClassPattern
from csspruner.scanner.scanner import (
    DEFAULT_EXTENSIONS,
    EXCLUDED_DIRS,
    ClassScanner,
    compile_dynamic_pattern,
    is_valid_class_name,
)

__all__ = [
    "ClassScanner",
    "DynamicClassPattern",
    "DEFAULT_DYNAMIC_PATTERNS",
    "DEFAULT_EXTENSIONS",
    "EXCLUDED_DIRS",
    "compile_dynamic_pattern",
    "is_valid_class_name",
]
