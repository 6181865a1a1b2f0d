"""Aggregating health check service.

Runs the registered probes under an enforced per-probe deadline, derives the
overall status from probe criticality, memoizes unfiltered runs for a short
freshness window and computes run statistics.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from pulsecheck.domain.entities.health import (
    AggregateReport,
    ProbeResult,
    ProbeStatus,
)
from pulsecheck.domain.ports.health_check import IHealthCheckService
from pulsecheck.domain.ports.probe import Probe
from pulsecheck.domain.services.health_evaluation import (
    DURATION_PRECISION,
    belongs_to_group,
    compute_statistics,
    resolve_overall_status,
    validate_probe_names,
)
from pulsecheck.shared import get_logger

logger = get_logger(__name__)

DEFAULT_CACHE_TTL = 1.0

# (probe name, result) pairs; criticality is resolved by name, never by index.
NamedResults = Tuple[Tuple[str, ProbeResult], ...]


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    results: NamedResults
    captured_at: float


class HealthCheckService(IHealthCheckService):
    """Execute and aggregate dependency probes.

    The probe collection is fixed at construction. Only unfiltered runs of
    ``run_all`` write the cache; the entry is an immutable snapshot swapped
    in a single assignment so readers never see results from one run paired
    with the timestamp of another.
    """

    def __init__(
        self,
        probes: Iterable[Probe],
        *,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._probes: Tuple[Probe, ...] = tuple(probes)
        validate_probe_names(probe.name for probe in self._probes)
        self._by_name: Dict[str, Probe] = {probe.name: probe for probe in self._probes}
        self._cache_ttl = cache_ttl
        self._clock = clock
        self._cache: Optional[_CacheEntry] = None

    @property
    def probes(self) -> Tuple[Probe, ...]:
        return self._probes

    async def run_all(
        self, group: Optional[str] = None, use_cache: bool = True
    ) -> AggregateReport:
        """Run every probe, or only those belonging to ``group``.

        Args:
            group: Restrict the run to probes of this group (probes without
                groups always take part). Grouped runs bypass the cache.
            use_cache: Allow an unfiltered run to reuse results younger than
                the freshness window. A fresh unfiltered run always refreshes
                the cache, whatever this flag says.
        """
        start = time.perf_counter()
        named: Optional[NamedResults] = None
        if group is None and use_cache:
            named = self._fresh_results()
        cached = named is not None

        if named is None:
            named = await self._run_probes(group)
            if group is None:
                self._cache = _CacheEntry(results=named, captured_at=self._clock())

        results = [result for _, result in named]
        status = resolve_overall_status(
            (self._is_critical(name), result) for name, result in named
        )
        report = AggregateReport(
            status=status,
            timestamp=datetime.now(timezone.utc),
            duration=round(time.perf_counter() - start, DURATION_PRECISION),
            checks=tuple(results),
            statistics=compute_statistics(results),
            cached=cached,
        )
        logger.debug(
            "health.run.completed",
            group=group,
            cached=cached,
            status=status.value,
            checks=len(results),
            duration=report.duration,
        )
        return report

    async def get_health_status(self, use_cache: bool = True) -> ProbeStatus:
        """Overall status across every probe.

        A fresh cache entry is reused when allowed. Otherwise probes run one by
        one and the first critical failure ends the run early; this path never
        writes the cache.
        """
        named = self._fresh_results() if use_cache else None
        if named is not None:
            return resolve_overall_status(
                (self._is_critical(name), result) for name, result in named
            )

        for probe in self._probes:
            result = await self._execute(probe)
            if probe.critical and result.is_unhealthy:
                logger.debug("health.status.short_circuit", probe=probe.name)
                return ProbeStatus.UNHEALTHY
        return ProbeStatus.HEALTHY

    async def run_check(self, name: str) -> Optional[ProbeResult]:
        """Run the probe called ``name`` directly, bypassing the cache."""
        probe = self._by_name.get(name)
        if probe is None:
            return None
        return await self._execute(probe)

    async def aclose(self) -> None:
        """Release resources held by the probes."""
        for probe in self._probes:
            close = getattr(probe, "aclose", None)
            if close is None:
                continue
            try:
                await close()
            except Exception as exc:
                logger.warning(
                    "health.probe.close_failed", probe=probe.name, error=str(exc)
                )

    def _fresh_results(self) -> Optional[NamedResults]:
        entry = self._cache
        if entry is None:
            return None
        if self._clock() - entry.captured_at >= self._cache_ttl:
            return None
        return entry.results

    def _is_critical(self, name: str) -> bool:
        probe = self._by_name.get(name)
        return probe is not None and probe.critical

    def _select(self, group: Optional[str]) -> List[Probe]:
        if group is None:
            return list(self._probes)
        return [p for p in self._probes if belongs_to_group(p.groups, group)]

    async def _run_probes(self, group: Optional[str]) -> NamedResults:
        selected: Sequence[Probe] = self._select(group)
        named = []
        for probe in selected:
            named.append((probe.name, await self._execute(probe)))
        return tuple(named)

    async def _execute(self, probe: Probe) -> ProbeResult:
        """Run one probe under its deadline; never raises.

        The duration is always measured here, whatever the probe reported.
        """
        start = time.perf_counter()
        try:
            result = await asyncio.wait_for(probe.run(), timeout=probe.timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "health.probe.timeout", probe=probe.name, timeout=probe.timeout
            )
            return ProbeResult(
                name=probe.name,
                status=ProbeStatus.UNHEALTHY,
                message="probe timed out",
                duration=time.perf_counter() - start,
                metadata={"timeout": probe.timeout},
            )
        except Exception as exc:
            logger.error(
                "health.probe.error",
                probe=probe.name,
                error=str(exc),
                exc_info=exc,
            )
            return ProbeResult(
                name=probe.name,
                status=ProbeStatus.UNHEALTHY,
                message="Health check failed",
                duration=time.perf_counter() - start,
            )
        return result.with_duration(time.perf_counter() - start)
