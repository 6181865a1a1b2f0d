"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .health_dto import (
    HealthReportDTO,
    PingDTO,
    ProbeResultDTO,
    SlowestCheckDTO,
    StatisticsDTO,
)

__all__ = [
    "HealthReportDTO",
    "PingDTO",
    "ProbeResultDTO",
    "SlowestCheckDTO",
    "StatisticsDTO",
]
