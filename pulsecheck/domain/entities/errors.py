"""
Domain Errors

Custom error classes for domain-specific exceptions. The aggregator itself
never raises these while serving a request; they are raised by the
application layer and at construction time.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ProbeNotFoundError(DomainError):
    """Raised when no registered probe carries the requested name."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        self.name = name
        super().__init__(f"Health check '{name}' not found", details)


class ProbeConfigurationError(DomainError):
    """Raised when the registered probe set is invalid."""
