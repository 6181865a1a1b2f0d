"""
Health domain entities.

Value objects produced by probes and by the aggregator. They are immutable:
a ProbeResult is created once per probe execution and an AggregateReport once
per aggregation call.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ProbeStatus(str, Enum):
    """Outcome of a probe, also used for the aggregate status."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @property
    def is_healthy(self) -> bool:
        return self is ProbeStatus.HEALTHY

    @property
    def is_degraded(self) -> bool:
        return self is ProbeStatus.DEGRADED

    @property
    def is_unhealthy(self) -> bool:
        return self is ProbeStatus.UNHEALTHY

    @property
    def http_status_code(self) -> int:
        """Degraded dependencies still serve traffic, only unhealthy maps to 503."""
        return 503 if self is ProbeStatus.UNHEALTHY else 200


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Result of a single probe execution."""

    name: str
    status: ProbeStatus
    message: str
    duration: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_healthy(self) -> bool:
        return self.status.is_healthy

    @property
    def is_unhealthy(self) -> bool:
        return self.status.is_unhealthy

    def with_duration(self, duration: float) -> ProbeResult:
        """Return a copy carrying the duration measured by the caller."""
        return replace(self, duration=max(0.0, duration))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "duration": round(self.duration, 3),
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True, slots=True)
class SlowestCheck:
    name: str
    duration: float


@dataclass(frozen=True, slots=True)
class RunStatistics:
    """Summary computed over the results of one aggregation."""

    total_checks: int = 0
    slow_checks: int = 0
    average_duration: float = 0.0
    slowest_check: Optional[SlowestCheck] = None


@dataclass(frozen=True, slots=True)
class AggregateReport:
    """Snapshot returned by the aggregator for one invocation.

    ``status`` is only ever HEALTHY or UNHEALTHY: a degraded probe never makes
    the aggregate degraded. ``cached`` tells whether the checks were served
    from the short-lived result cache.
    """

    status: ProbeStatus
    timestamp: datetime
    duration: float
    checks: Tuple[ProbeResult, ...] = ()
    statistics: RunStatistics = field(default_factory=RunStatistics)
    cached: bool = False

    @property
    def is_healthy(self) -> bool:
        return self.status.is_healthy
