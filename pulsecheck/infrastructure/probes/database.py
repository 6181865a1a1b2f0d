"""MongoDB connectivity probe."""

from __future__ import annotations

import asyncio
from typing import Iterable, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from pulsecheck.domain.entities.health import ProbeResult
from pulsecheck.infrastructure.probes.base import BaseProbe

DEFAULT_CONNECTION = "default"


class DatabaseProbe(BaseProbe):
    """Checks that a MongoDB deployment answers ``ping``.

    Several connections can be probed side by side: the ``default`` one is
    reported as ``database``, any other as ``database_<connection_name>``.
    """

    def __init__(
        self,
        client: MongoClient,
        *,
        connection_name: str = DEFAULT_CONNECTION,
        timeout: float = 5.0,
        critical: bool = True,
        groups: Optional[Iterable[str]] = None,
    ) -> None:
        name = (
            "database"
            if connection_name == DEFAULT_CONNECTION
            else f"database_{connection_name}"
        )
        super().__init__(name=name, timeout=timeout, critical=critical, groups=groups)
        self._client = client
        self._connection_name = connection_name

    async def _do_check(self) -> ProbeResult:
        try:
            reply = await asyncio.to_thread(self._client.admin.command, "ping")
        except PyMongoError:
            return self._unhealthy("Database connection failed")

        if float(reply.get("ok", 0)) != 1.0:
            return self._unhealthy("Database query failed")

        return self._healthy(
            "Database operational", {"connection": self._connection_name}
        )

    async def aclose(self) -> None:
        self._client.close()
