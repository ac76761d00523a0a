from csspruner.classify.classifier import (
    REASONS,
    UsageClassifier,
    class_tokens,
    is_special_selector,
)

__all__ = ["UsageClassifier", "class_tokens", "is_special_selector", "REASONS"]
