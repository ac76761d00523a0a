"""csspruner: find and safely remove unused CSS selectors."""

import logging

__version__ = "0.1.0"

logging.getLogger("csspruner").addHandler(logging.NullHandler())

from csspruner.config import PrunerConfig, load_config  # noqa: E402
from csspruner.errors import (  # noqa: E402
    ConfigError,
    FileReadError,
    FileWriteError,
    PatternSyntaxError,
    PrunerError,
    StructuralParseError,
)
from csspruner.model import (  # noqa: E402
    AnalysisResult,
    AnalysisStats,
    ClassifiedSelector,
    CleanResult,
    StylesheetRule,
    Verdict,
)
from csspruner.pruner import Pruner, analyze, clean  # noqa: E402

__all__ = [
    "__version__",
    "analyze",
    "clean",
    "Pruner",
    "PrunerConfig",
    "load_config",
    "AnalysisResult",
    "AnalysisStats",
    "CleanResult",
    "ClassifiedSelector",
    "StylesheetRule",
    "Verdict",
    "PrunerError",
    "ConfigError",
    "PatternSyntaxError",
    "FileReadError",
    "FileWriteError",
    "StructuralParseError",
]
