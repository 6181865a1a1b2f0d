"""Probe-free liveness endpoint."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pulsecheck.application.dtos.health_dto import PingDTO
from pulsecheck.application.use_cases.health_use_cases import PingUseCase
from pulsecheck.shared import HEALTH_RESPONSE_HEADERS

router = APIRouter(tags=["Health"])


@router.get("/ping", response_model=PingDTO)
@inject
async def ping(
    ping_use_case: PingUseCase = Depends(Provide["ping_use_case"]),
) -> JSONResponse:
    """Always 200 while the process serves requests; runs no checks."""
    pong = await ping_use_case.execute()
    return JSONResponse(
        content=pong.model_dump(mode="json"),
        status_code=status.HTTP_200_OK,
        headers=HEALTH_RESPONSE_HEADERS,
    )
