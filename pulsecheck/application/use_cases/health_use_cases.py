"""Use cases behind the health, readiness and ping endpoints."""

from datetime import datetime, timezone
from typing import Optional

from pulsecheck.application.dtos.health_dto import (
    HealthReportDTO,
    PingDTO,
    ProbeResultDTO,
)
from pulsecheck.domain.entities.errors import ProbeNotFoundError
from pulsecheck.domain.entities.health import ProbeStatus
from pulsecheck.domain.ports.health_check import IHealthCheckService


class GetHealthReportUseCase:
    """Aggregate every probe, or the probes of one group."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self, group: Optional[str] = None) -> HealthReportDTO:
        report = await self._health_check_service.run_all(group)
        return HealthReportDTO.from_domain(report)


class GetReadinessUseCase:
    """Aggregate the probes of the readiness group only."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        readiness_group: str = "readiness",
    ) -> None:
        self._health_check_service = health_check_service
        self._readiness_group = readiness_group

    async def execute(self) -> HealthReportDTO:
        report = await self._health_check_service.run_all(self._readiness_group)
        return HealthReportDTO.from_domain(report)


class GetHealthStatusUseCase:
    """Return the overall status without building a full report."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> ProbeStatus:
        return await self._health_check_service.get_health_status()


class RunProbeUseCase:
    """Run a single probe by name."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self, name: str) -> ProbeResultDTO:
        result = await self._health_check_service.run_check(name)
        if result is None:
            raise ProbeNotFoundError(name)
        return ProbeResultDTO.from_domain(result)


class PingUseCase:
    """Liveness answer that touches no dependency."""

    async def execute(self) -> PingDTO:
        return PingDTO(status="up", timestamp=datetime.now(timezone.utc))
