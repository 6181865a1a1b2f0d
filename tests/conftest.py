from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from pulsecheck.domain.entities.health import ProbeResult, ProbeStatus

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeProbe:
    """Scriptable probe satisfying the Probe protocol."""

    def __init__(
        self,
        name: str,
        status: ProbeStatus = ProbeStatus.HEALTHY,
        *,
        critical: bool = False,
        groups: Iterable[str] = (),
        timeout: float = 1.0,
        duration: float = 0.0,
        delay: float = 0.0,
        error: Optional[Exception] = None,
        message: Optional[str] = None,
    ) -> None:
        self.name = name
        self.status = status
        self.critical = critical
        self.groups = frozenset(groups)
        self.timeout = timeout
        self.duration = duration
        self.delay = delay
        self.error = error
        self.message = message or f"{name} {status.value}"
        self.calls = 0
        self.closed = False

    async def run(self) -> ProbeResult:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return ProbeResult(
            name=self.name,
            status=self.status,
            message=self.message,
            duration=self.duration,
        )

    async def aclose(self) -> None:
        self.closed = True


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def make_probe() -> Callable[..., FakeProbe]:
    return FakeProbe


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
