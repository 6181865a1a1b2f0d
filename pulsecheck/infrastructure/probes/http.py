"""HTTP endpoint reachability probe."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import httpx

from pulsecheck.domain.entities.health import ProbeResult
from pulsecheck.infrastructure.probes.base import BaseProbe

DEFAULT_EXPECTED_STATUS_CODES = (200, 201, 204)


class HttpProbe(BaseProbe):
    """Issues a GET against ``url`` and compares the final status code.

    Redirects are followed, so only the last response of the chain counts.
    """

    def __init__(
        self,
        url: str,
        *,
        name: str = "http_endpoint",
        timeout: float = 5.0,
        critical: bool = False,
        expected_status_codes: Sequence[int] = DEFAULT_EXPECTED_STATUS_CODES,
        groups: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(name=name, timeout=timeout, critical=critical, groups=groups)
        self.url = url
        self.expected_status_codes = frozenset(expected_status_codes)

    async def _do_check(self) -> ProbeResult:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.get(self.url)
        except httpx.HTTPError:
            return self._unhealthy("HTTP endpoint unreachable", {"url": self.url})

        metadata = {"url": self.url, "status_code": response.status_code}
        if response.status_code not in self.expected_status_codes:
            return self._unhealthy("HTTP endpoint returned unexpected status", metadata)

        return self._healthy("HTTP endpoint operational", metadata)
