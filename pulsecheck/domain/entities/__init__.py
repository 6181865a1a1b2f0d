"""
Domain Entities Package

Health value objects and domain errors.
"""

from .errors import DomainError, ProbeConfigurationError, ProbeNotFoundError
from .health import (
    AggregateReport,
    ProbeResult,
    ProbeStatus,
    RunStatistics,
    SlowestCheck,
)

__all__ = [
    "AggregateReport",
    "ProbeResult",
    "ProbeStatus",
    "RunStatistics",
    "SlowestCheck",
    "DomainError",
    "ProbeNotFoundError",
    "ProbeConfigurationError",
]
