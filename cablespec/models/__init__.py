"""Data models for the cable specification parser."""

from .cable import (
    CableSpec,
    CableCategory,
    CATEGORY_LABELS,
    CORES_PER_PAIR,
    POWER_CABLE,
    CONTROL_CABLE,
    VARIABLE_FREQUENCY_CABLE,
    TWISTED_PAIR_CABLE,
    UNCLASSIFIED_CABLE,
    format_section,
)

__all__ = [
    "CableSpec",
    "CableCategory",
    "CATEGORY_LABELS",
    "CORES_PER_PAIR",
    "POWER_CABLE",
    "CONTROL_CABLE",
    "VARIABLE_FREQUENCY_CABLE",
    "TWISTED_PAIR_CABLE",
    "UNCLASSIFIED_CABLE",
    "format_section",
]
