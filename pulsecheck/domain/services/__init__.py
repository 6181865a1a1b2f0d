"""Domain services package."""

from .health_evaluation import (
    SLOW_CHECK_THRESHOLD,
    belongs_to_group,
    compute_statistics,
    resolve_overall_status,
    validate_probe_names,
)

__all__ = [
    "SLOW_CHECK_THRESHOLD",
    "belongs_to_group",
    "compute_statistics",
    "resolve_overall_status",
    "validate_probe_names",
]
