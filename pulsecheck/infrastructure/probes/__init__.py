"""Built-in dependency probes."""

from .base import BaseProbe
from .cache import CacheProbe
from .database import DatabaseProbe
from .http import HttpProbe
from .object_store import AzureBlobObjectStore, ObjectStore, ObjectStoreProbe

__all__ = [
    "BaseProbe",
    "CacheProbe",
    "DatabaseProbe",
    "HttpProbe",
    "ObjectStoreProbe",
    "ObjectStore",
    "AzureBlobObjectStore",
]
