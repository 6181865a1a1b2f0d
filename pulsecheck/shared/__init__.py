"""
Shared module - Cross-cutting concerns / Shared Layer

Holds definitions used by more than one layer: environment and log level
enums, the response headers every health endpoint carries, and the structlog
setup. It must not depend on Infrastructure or Frameworks.
"""

from .consts import HEALTH_RESPONSE_HEADERS, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "HEALTH_RESPONSE_HEADERS",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
