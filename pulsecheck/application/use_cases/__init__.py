"""
Use Cases Package - Application Layer

Use cases orchestrate calls to the health check service and map domain
results onto response DTOs.
"""

from .health_use_cases import (
    GetHealthReportUseCase,
    GetHealthStatusUseCase,
    GetReadinessUseCase,
    PingUseCase,
    RunProbeUseCase,
)

__all__ = [
    "GetHealthReportUseCase",
    "GetHealthStatusUseCase",
    "GetReadinessUseCase",
    "PingUseCase",
    "RunProbeUseCase",
]
