"""
Main module - Main/Composition Root Layer

Orchestrates the initialization of the other layers:
- Loading settings from the environment
- Registering the enabled probes (Composition Root)
- Initializing FastAPI
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
