"""Domain ports package."""

from .health_check import IHealthCheckService
from .probe import Probe

__all__ = ["IHealthCheckService", "Probe"]
