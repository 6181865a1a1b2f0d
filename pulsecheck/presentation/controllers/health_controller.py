"""Health and readiness endpoints."""

from typing import Annotated, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pulsecheck.application.dtos.health_dto import HealthReportDTO, ProbeResultDTO
from pulsecheck.application.use_cases.health_use_cases import (
    GetHealthReportUseCase,
    GetHealthStatusUseCase,
    GetReadinessUseCase,
    RunProbeUseCase,
)
from pulsecheck.domain.entities.errors import ProbeNotFoundError
from pulsecheck.shared import HEALTH_RESPONSE_HEADERS, get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])

_UNHEALTHY_RESPONSE = {
    status.HTTP_503_SERVICE_UNAVAILABLE: {
        "model": HealthReportDTO,
        "description": "A critical dependency is unhealthy",
    }
}


def _json_response(payload: BaseModel, status_code: int) -> JSONResponse:
    return JSONResponse(
        content=payload.model_dump(mode="json"),
        status_code=status_code,
        headers=HEALTH_RESPONSE_HEADERS,
    )


def _report_response(report: HealthReportDTO) -> JSONResponse:
    return _json_response(report, report.status.http_status_code)


def _unavailable(exc: Exception, event: str) -> HTTPException:
    logger.error(event, error=str(exc), exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Unable to retrieve system health status",
        headers=HEALTH_RESPONSE_HEADERS,
    )


@router.get("/health", response_model=HealthReportDTO, responses=_UNHEALTHY_RESPONSE)
@inject
async def health(
    group: Annotated[
        Optional[str],
        Query(description="Only run checks of this group (e.g. web, worker)"),
    ] = None,
    get_health_report_use_case: GetHealthReportUseCase = Depends(
        Provide["get_health_report_use_case"]
    ),
) -> JSONResponse:
    """Run the health checks; 200 when healthy, 503 otherwise."""
    try:
        report = await get_health_report_use_case.execute(group)
    except Exception as exc:
        raise _unavailable(exc, "health.check.failure") from exc

    logger.debug("health.check.success", group=group, status=report.status.value)
    return _report_response(report)


@router.head("/health")
@inject
async def health_head(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> Response:
    """Status-only variant of /health for load balancers, no body."""
    try:
        overall = await get_health_status_use_case.execute()
    except Exception as exc:
        raise _unavailable(exc, "health.status.failure") from exc

    return Response(
        status_code=overall.http_status_code, headers=HEALTH_RESPONSE_HEADERS
    )


@router.get("/ready", response_model=HealthReportDTO, responses=_UNHEALTHY_RESPONSE)
@inject
async def readiness(
    get_readiness_use_case: GetReadinessUseCase = Depends(
        Provide["get_readiness_use_case"]
    ),
) -> JSONResponse:
    """Readiness probe: only the checks of the readiness group are run."""
    try:
        report = await get_readiness_use_case.execute()
    except Exception as exc:
        raise _unavailable(exc, "readiness.check.failure") from exc

    logger.debug("readiness.check.success", status=report.status.value)
    return _report_response(report)


@router.get(
    "/health/checks/{name}",
    response_model=ProbeResultDTO,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Unknown check"}},
)
@inject
async def run_check(
    name: str,
    run_probe_use_case: RunProbeUseCase = Depends(Provide["run_probe_use_case"]),
) -> JSONResponse:
    """Run one named check, bypassing the result cache."""
    try:
        result = await run_probe_use_case.execute(name)
    except ProbeNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.message,
            headers=HEALTH_RESPONSE_HEADERS,
        ) from exc
    except Exception as exc:
        raise _unavailable(exc, "health.single_check.failure") from exc

    return _json_response(result, result.status.http_status_code)
