from __future__ import annotations

from typing import Any, Dict, Optional

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from pulsecheck.domain.entities.health import ProbeStatus
from pulsecheck.infrastructure.probes.database import DatabaseProbe


class _StubMongoClient:
    def __init__(
        self,
        reply: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._reply = reply if reply is not None else {"ok": 1.0}
        self._error = error
        self.commands = []
        self.closed = False

    @property
    def admin(self) -> "_StubMongoClient":
        return self

    def command(self, cmd: str) -> Dict[str, Any]:
        self.commands.append(cmd)
        if self._error is not None:
            raise self._error
        return self._reply

    def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_ping_success_is_healthy() -> None:
    client = _StubMongoClient()
    probe = DatabaseProbe(client)

    result = await probe.run()

    assert probe.name == "database"
    assert probe.critical is True
    assert result.status is ProbeStatus.HEALTHY
    assert result.message == "Database operational"
    assert result.metadata == {"connection": "default"}
    assert client.commands == ["ping"]


def test_named_connection_is_suffixed() -> None:
    probe = DatabaseProbe(_StubMongoClient(), connection_name="analytics")
    assert probe.name == "database_analytics"


@pytest.mark.asyncio
async def test_connection_error_is_unhealthy() -> None:
    probe = DatabaseProbe(
        _StubMongoClient(error=ServerSelectionTimeoutError("no servers"))
    )

    result = await probe.run()

    assert result.status is ProbeStatus.UNHEALTHY
    assert result.message == "Database connection failed"


@pytest.mark.asyncio
async def test_unexpected_reply_is_query_failure() -> None:
    probe = DatabaseProbe(_StubMongoClient(reply={"ok": 0}))

    result = await probe.run()

    assert result.status is ProbeStatus.UNHEALTHY
    assert result.message == "Database query failed"


@pytest.mark.asyncio
async def test_aclose_closes_client() -> None:
    client = _StubMongoClient()
    await DatabaseProbe(client).aclose()
    assert client.closed is True
