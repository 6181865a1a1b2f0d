"""Base class for dependency probes.

Concrete probes implement ``_do_check`` only. ``run`` times the call, replaces
whatever duration the probe reported with the measured one, and converts any
escaping exception into an unhealthy result so the aggregator never sees it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from time import perf_counter
from typing import Any, Dict, FrozenSet, Iterable, Optional

from pulsecheck.domain.entities.health import ProbeResult, ProbeStatus
from pulsecheck.shared import get_logger

logger = get_logger(__name__)


class BaseProbe(ABC):
    """Timing and failure isolation shared by every built-in probe."""

    def __init__(
        self,
        *,
        name: str,
        timeout: float = 5.0,
        critical: bool = False,
        groups: Optional[Iterable[str]] = None,
    ) -> None:
        self.name = name
        self.timeout = timeout
        self.critical = critical
        self.groups: FrozenSet[str] = frozenset(groups or ())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, critical={self.critical}, "
            f"groups={sorted(self.groups)})"
        )

    async def run(self) -> ProbeResult:
        start = perf_counter()
        try:
            result = await self._do_check()
        except Exception as exc:
            logger.warning(
                "health.probe.failed",
                probe=self.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            result = self._unhealthy("Health check failed")
        return result.with_duration(perf_counter() - start)

    async def aclose(self) -> None:
        """Release resources held between runs; nothing by default."""

    @abstractmethod
    async def _do_check(self) -> ProbeResult:
        """Perform the check. Durations returned here are overwritten."""

    def _result(
        self,
        status: ProbeStatus,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> ProbeResult:
        return ProbeResult(
            name=self.name,
            status=status,
            message=message,
            duration=0.0,
            metadata=metadata or {},
        )

    def _healthy(
        self, message: str, metadata: Optional[Dict[str, Any]] = None
    ) -> ProbeResult:
        return self._result(ProbeStatus.HEALTHY, message, metadata)

    def _degraded(
        self, message: str, metadata: Optional[Dict[str, Any]] = None
    ) -> ProbeResult:
        return self._result(ProbeStatus.DEGRADED, message, metadata)

    def _unhealthy(
        self, message: str, metadata: Optional[Dict[str, Any]] = None
    ) -> ProbeResult:
        return self._result(ProbeStatus.UNHEALTHY, message, metadata)
