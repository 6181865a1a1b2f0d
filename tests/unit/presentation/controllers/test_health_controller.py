from __future__ import annotations

import json

import pytest
from fastapi import HTTPException

from pulsecheck.application.use_cases.health_use_cases import (
    GetHealthReportUseCase,
    GetHealthStatusUseCase,
    GetReadinessUseCase,
    RunProbeUseCase,
)
from pulsecheck.domain.entities.health import ProbeStatus
from pulsecheck.infrastructure.services.health_check_service import HealthCheckService
from pulsecheck.presentation.controllers.health_controller import (
    health,
    health_head,
    readiness,
    run_check,
)
from pulsecheck.shared import HEALTH_RESPONSE_HEADERS


class _FailingService:
    async def run_all(self, group=None, use_cache=True):
        raise RuntimeError("service exploded")

    async def get_health_status(self, use_cache=True):
        raise RuntimeError("service exploded")


def _assert_headers(response) -> None:
    for name, value in HEALTH_RESPONSE_HEADERS.items():
        assert response.headers[name] == value


@pytest.mark.asyncio
async def test_health_returns_200_when_healthy(make_probe) -> None:
    service = HealthCheckService([make_probe("database", critical=True)])

    response = await health(
        group=None, get_health_report_use_case=GetHealthReportUseCase(service)
    )

    assert response.status_code == 200
    body = json.loads(response.body)
    assert body["status"] == "healthy"
    assert body["checks"][0]["name"] == "database"
    _assert_headers(response)


@pytest.mark.asyncio
async def test_health_returns_503_on_critical_failure(make_probe) -> None:
    service = HealthCheckService(
        [make_probe("database", ProbeStatus.UNHEALTHY, critical=True)]
    )

    response = await health(
        group=None, get_health_report_use_case=GetHealthReportUseCase(service)
    )

    assert response.status_code == 503
    assert json.loads(response.body)["status"] == "unhealthy"


@pytest.mark.asyncio
async def test_health_filters_by_group(make_probe) -> None:
    service = HealthCheckService(
        [make_probe("queue", groups=["worker"]), make_probe("api", groups=["web"])]
    )

    response = await health(
        group="worker", get_health_report_use_case=GetHealthReportUseCase(service)
    )

    assert [c["name"] for c in json.loads(response.body)["checks"]] == ["queue"]


@pytest.mark.asyncio
async def test_health_unexpected_error_maps_to_503() -> None:
    with pytest.raises(HTTPException) as exc_info:
        await health(
            group=None,
            get_health_report_use_case=GetHealthReportUseCase(_FailingService()),
        )

    assert exc_info.value.status_code == 503
    assert exc_info.value.headers == HEALTH_RESPONSE_HEADERS


@pytest.mark.asyncio
async def test_head_returns_status_without_body(make_probe) -> None:
    service = HealthCheckService(
        [make_probe("database", ProbeStatus.UNHEALTHY, critical=True)]
    )

    response = await health_head(
        get_health_status_use_case=GetHealthStatusUseCase(service)
    )

    assert response.status_code == 503
    assert response.body == b""
    _assert_headers(response)


@pytest.mark.asyncio
async def test_readiness_runs_readiness_group(make_probe) -> None:
    service = HealthCheckService(
        [
            make_probe("database", groups=["readiness"]),
            make_probe("api", ProbeStatus.UNHEALTHY, critical=True, groups=["web"]),
        ]
    )

    response = await readiness(get_readiness_use_case=GetReadinessUseCase(service))

    assert response.status_code == 200
    assert [c["name"] for c in json.loads(response.body)["checks"]] == ["database"]


@pytest.mark.asyncio
async def test_run_check_uses_check_status_code(make_probe) -> None:
    service = HealthCheckService(
        [
            make_probe("redis", ProbeStatus.UNHEALTHY),
            make_probe("api", ProbeStatus.DEGRADED),
        ]
    )
    use_case = RunProbeUseCase(service)

    unhealthy = await run_check(name="redis", run_probe_use_case=use_case)
    degraded = await run_check(name="api", run_probe_use_case=use_case)

    assert unhealthy.status_code == 503
    assert degraded.status_code == 200
    assert json.loads(degraded.body)["status"] == "degraded"
    _assert_headers(degraded)


@pytest.mark.asyncio
async def test_run_check_unknown_name_is_404(make_probe) -> None:
    service = HealthCheckService([make_probe("database")])

    with pytest.raises(HTTPException) as exc_info:
        await run_check(name="missing", run_probe_use_case=RunProbeUseCase(service))

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Health check 'missing' not found"
