"""Object storage probe.

The probe talks to an ``ObjectStore``, a minimal listing interface, so any
bucket-like backend can be checked. ``AzureBlobObjectStore`` adapts an Azure
Blob Storage container.
"""

from __future__ import annotations

import asyncio
from itertools import islice
from typing import Iterable, Iterator, List, Optional, Protocol

from azure.storage.blob import ContainerClient

from pulsecheck.domain.entities.health import ProbeResult
from pulsecheck.infrastructure.probes.base import BaseProbe


class ObjectStore(Protocol):
    def list_contents(self, path: str) -> Iterator[str]:
        """Yield object names stored under ``path``."""
        ...


class AzureBlobObjectStore:
    """ObjectStore backed by an Azure Blob Storage container."""

    def __init__(self, container_client: ContainerClient) -> None:
        self._container = container_client

    @classmethod
    def from_connection_string(
        cls, connection_string: str, container: str
    ) -> "AzureBlobObjectStore":
        return cls(
            ContainerClient.from_connection_string(
                connection_string, container_name=container
            )
        )

    def list_contents(self, path: str) -> Iterator[str]:
        prefix = path.strip("/") or None
        for blob in self._container.list_blobs(name_starts_with=prefix):
            yield blob.name

    def close(self) -> None:
        self._container.close()


class ObjectStoreProbe(BaseProbe):
    """Verifies bucket access by listing the first object at the root."""

    def __init__(
        self,
        store: ObjectStore,
        *,
        name: str = "object_store",
        timeout: float = 5.0,
        critical: bool = False,
        groups: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(name=name, timeout=timeout, critical=critical, groups=groups)
        self._store = store

    def _list_first(self) -> List[str]:
        return list(islice(self._store.list_contents("/"), 1))

    async def _do_check(self) -> ProbeResult:
        try:
            await asyncio.to_thread(self._list_first)
        except Exception:
            return self._unhealthy("Object storage connection failed")
        return self._healthy("Object storage operational")

    async def aclose(self) -> None:
        close = getattr(self._store, "close", None)
        if callable(close):
            close()
