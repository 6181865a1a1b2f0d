"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Optional, Protocol

from pulsecheck.domain.entities.health import AggregateReport, ProbeResult, ProbeStatus


class IHealthCheckService(Protocol):
    """Interface of the probe aggregator consumed by the use cases."""

    async def run_all(
        self, group: Optional[str] = None, use_cache: bool = True
    ) -> AggregateReport:
        """Run the registered probes (optionally one group) and aggregate."""
        ...

    async def get_health_status(self, use_cache: bool = True) -> ProbeStatus:
        """Return only the overall status across every probe."""
        ...

    async def run_check(self, name: str) -> Optional[ProbeResult]:
        """Run one probe by name, None when no probe has that name."""
        ...
