"""csspruner model layer -- public type re-exports."""

from csspruner.model.plan import RemovalPlan
from csspruner.model.result import AnalysisResult, AnalysisStats, CleanResult
from csspruner.model.rule import StylesheetRule, rule_size
from csspruner.model.selector import ClassifiedSelector, Verdict

__all__ = [
    # rule
    "StylesheetRule",
    "rule_size",
    # selector
    "Verdict",
    "ClassifiedSelector",
    # plan
    "RemovalPlan",
    # result
    "AnalysisStats",
    "AnalysisResult",
    "CleanResult",
]
