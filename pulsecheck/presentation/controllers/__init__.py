"""
Controllers Package - Presentation Layer

FastAPI routers translating health reports into HTTP status codes and
non-cacheable JSON responses.
"""

from .health_controller import router as health_router
from .ping_controller import router as ping_router

__all__ = ["health_router", "ping_router"]
