"""DTOs for the health, readiness and ping response payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from pulsecheck.domain.entities.health import (
    AggregateReport,
    ProbeResult,
    ProbeStatus,
    RunStatistics,
    SlowestCheck,
)


class ProbeResultDTO(BaseModel):
    """Serializable representation of one probe execution."""

    name: str = Field(description="Health check identifier")
    status: ProbeStatus = Field(description="Outcome of the check")
    message: str = Field(description="Human readable status note")
    duration: float = Field(description="Execution time in seconds")
    metadata: Dict[str, Any] = Field(
        default_factory=dict, description="Additional context"
    )

    @classmethod
    def from_domain(cls, result: ProbeResult) -> "ProbeResultDTO":
        return cls(**result.to_dict())

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "database",
                "status": "healthy",
                "message": "Database operational",
                "duration": 0.012,
                "metadata": {"connection": "default"},
            }
        }
    }


class SlowestCheckDTO(BaseModel):
    name: str
    duration: float

    @classmethod
    def from_domain(cls, slowest: SlowestCheck) -> "SlowestCheckDTO":
        return cls(name=slowest.name, duration=slowest.duration)


class StatisticsDTO(BaseModel):
    """Summary of the durations observed during one run."""

    total_checks: int = Field(description="Number of checks executed")
    slow_checks: int = Field(description="Checks that took longer than 1 second")
    average_duration: float = Field(description="Mean duration in seconds")
    slowest_check: Optional[SlowestCheckDTO] = Field(
        default=None, description="Slowest check, null when nothing ran"
    )

    @classmethod
    def from_domain(cls, stats: RunStatistics) -> "StatisticsDTO":
        return cls(
            total_checks=stats.total_checks,
            slow_checks=stats.slow_checks,
            average_duration=stats.average_duration,
            slowest_check=(
                SlowestCheckDTO.from_domain(stats.slowest_check)
                if stats.slowest_check
                else None
            ),
        )


class HealthReportDTO(BaseModel):
    """DTO representing the /health and /ready response payload."""

    status: ProbeStatus = Field(description="Overall status, healthy or unhealthy")
    timestamp: datetime = Field(description="Report generation instant")
    duration: float = Field(description="Total run time in seconds")
    checks: List[ProbeResultDTO] = Field(
        default_factory=list, description="Results in registration order"
    )
    statistics: StatisticsDTO

    @classmethod
    def from_domain(cls, report: AggregateReport) -> "HealthReportDTO":
        return cls(
            status=report.status,
            timestamp=report.timestamp,
            duration=report.duration,
            checks=[ProbeResultDTO.from_domain(result) for result in report.checks],
            statistics=StatisticsDTO.from_domain(report.statistics),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "timestamp": "2024-09-09T12:00:00Z",
                "duration": 0.015,
                "checks": [
                    {
                        "name": "database",
                        "status": "healthy",
                        "message": "Database operational",
                        "duration": 0.012,
                        "metadata": {"connection": "default"},
                    }
                ],
                "statistics": {
                    "total_checks": 1,
                    "slow_checks": 0,
                    "average_duration": 0.012,
                    "slowest_check": {"name": "database", "duration": 0.012},
                },
            }
        }
    }


class PingDTO(BaseModel):
    """DTO for the probe-free liveness endpoint."""

    status: str = Field(default="up")
    timestamp: datetime
