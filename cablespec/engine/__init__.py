"""Classification and ordering engine for cable specifications."""

from .classifier import (
    CONTROL_PREFIXES,
    CategoryClassifier,
    classify_model,
)

from .sorter import (
    group_cables_by_category,
    sort_cables,
)

__all__ = [
    # Classifier
    "CONTROL_PREFIXES",
    "CategoryClassifier",
    "classify_model",
    # Sorter
    "group_cables_by_category",
    "sort_cables",
]
