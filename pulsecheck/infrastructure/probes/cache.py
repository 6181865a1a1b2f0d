"""Redis connectivity probe keeping a persistent connection."""

from __future__ import annotations

import asyncio
from typing import Iterable, Optional, Set

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from pulsecheck.domain.entities.health import ProbeResult
from pulsecheck.infrastructure.probes.base import BaseProbe
from pulsecheck.shared import get_logger

logger = get_logger(__name__)

PONG_REPLIES = (True, "PONG", "+PONG", b"PONG", b"+PONG")


class CacheProbe(BaseProbe):
    """Checks Redis with ``PING``.

    The client is created on first use and reused across runs. When a run
    fails the client is closed and dropped, so the next run reconnects
    instead of reusing a broken connection. Runs are serialized on a lock
    because concurrent requests may hit the same probe instance.
    """

    def __init__(
        self,
        url: str,
        *,
        name: str = "redis",
        timeout: float = 3.0,
        connect_timeout: float = 2.0,
        critical: bool = False,
        groups: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(name=name, timeout=timeout, critical=critical, groups=groups)
        self._url = url
        self._connect_timeout = connect_timeout
        self._client: Optional[aioredis.Redis] = None
        self._lock = asyncio.Lock()
        self._closing: Set[asyncio.Task] = set()

    def _get_client(self) -> aioredis.Redis:
        if self._client is None:
            self._client = aioredis.from_url(
                self._url,
                socket_connect_timeout=self._connect_timeout,
                socket_timeout=self.timeout,
            )
        return self._client

    async def _discard_client(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            await self._close_client(client)

    def _close_in_background(self) -> None:
        """Drop the client now and close its pool once the cancelled run unwinds."""
        client, self._client = self._client, None
        if client is None:
            return
        task = asyncio.get_running_loop().create_task(self._close_client(client))
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)

    async def _close_client(self, client: aioredis.Redis) -> None:
        try:
            await client.aclose()
        except (RedisError, OSError) as exc:
            logger.debug("health.redis.close_failed", probe=self.name, error=str(exc))

    async def _do_check(self) -> ProbeResult:
        async with self._lock:
            try:
                reply = await self._get_client().ping()
            except asyncio.CancelledError:
                # Interrupted mid-command, the connection state is unknown.
                self._close_in_background()
                raise
            except (RedisError, OSError) as exc:
                logger.debug("health.redis.ping_failed", probe=self.name, error=str(exc))
                await self._discard_client()
                return self._unhealthy("Redis connection failed")

        if reply not in PONG_REPLIES:
            return self._unhealthy("Redis ping failed")
        return self._healthy("Redis operational")

    async def aclose(self) -> None:
        async with self._lock:
            await self._discard_client()
        if self._closing:
            await asyncio.gather(*self._closing, return_exceptions=True)
