from csspruner.removal.engine import RemovalEngine, bytes_saved
from csspruner.removal.outcome import RemovalOutcome, RemovalStatus
from csspruner.removal.structural import StructuralRemoval
from csspruner.removal.text import TextRemoval, normalize, removal_order, specificity_proxy

__all__ = [
    "RemovalEngine",
    "RemovalOutcome",
    "RemovalStatus",
    "StructuralRemoval",
    "TextRemoval",
    "bytes_saved",
    "normalize",
    "removal_order",
    "specificity_proxy",
]
