from __future__ import annotations

from types import SimpleNamespace
from typing import Iterator, List

import pytest

from pulsecheck.domain.entities.health import ProbeStatus
from pulsecheck.infrastructure.probes.object_store import (
    AzureBlobObjectStore,
    ObjectStoreProbe,
)


class _ListingStore:
    def __init__(self, names: List[str]) -> None:
        self._names = names
        self.yielded = 0
        self.closed = False

    def list_contents(self, path: str) -> Iterator[str]:
        for name in self._names:
            self.yielded += 1
            yield name

    def close(self) -> None:
        self.closed = True


class _BrokenStore:
    def list_contents(self, path: str) -> Iterator[str]:
        raise PermissionError("access denied")


class _StubContainerClient:
    def __init__(self) -> None:
        self.prefixes = []
        self.closed = False

    def list_blobs(self, name_starts_with=None):
        self.prefixes.append(name_starts_with)
        return iter([SimpleNamespace(name="reports/a.csv")])

    def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_listing_only_reads_first_object() -> None:
    store = _ListingStore(["a", "b", "c"])
    probe = ObjectStoreProbe(store)

    result = await probe.run()

    assert probe.name == "object_store"
    assert result.status is ProbeStatus.HEALTHY
    assert result.message == "Object storage operational"
    assert store.yielded == 1


@pytest.mark.asyncio
async def test_empty_bucket_is_healthy() -> None:
    result = await ObjectStoreProbe(_ListingStore([])).run()
    assert result.status is ProbeStatus.HEALTHY


@pytest.mark.asyncio
async def test_listing_error_is_unhealthy() -> None:
    result = await ObjectStoreProbe(_BrokenStore(), name="s3").run()

    assert result.name == "s3"
    assert result.status is ProbeStatus.UNHEALTHY
    assert result.message == "Object storage connection failed"


@pytest.mark.asyncio
async def test_aclose_closes_store() -> None:
    store = _ListingStore([])
    await ObjectStoreProbe(store).aclose()
    assert store.closed is True


def test_azure_store_lists_blob_names() -> None:
    container = _StubContainerClient()
    store = AzureBlobObjectStore(container)

    assert list(store.list_contents("/")) == ["reports/a.csv"]
    assert list(store.list_contents("/reports/")) == ["reports/a.csv"]
    assert container.prefixes == [None, "reports"]

    store.close()
    assert container.closed is True


def test_azure_store_from_connection_string(monkeypatch) -> None:
    captured = {}

    def fake_from_connection_string(conn_str, container_name):
        captured["args"] = (conn_str, container_name)
        return _StubContainerClient()

    monkeypatch.setattr(
        "pulsecheck.infrastructure.probes.object_store.ContainerClient.from_connection_string",
        fake_from_connection_string,
    )

    store = AzureBlobObjectStore.from_connection_string("UseDevelopmentStorage=true", "data")

    assert isinstance(store, AzureBlobObjectStore)
    assert captured["args"] == ("UseDevelopmentStorage=true", "data")
