"""Capability contract implemented by every dependency probe."""

from __future__ import annotations

from typing import FrozenSet, Protocol, runtime_checkable

from pulsecheck.domain.entities.health import ProbeResult


@runtime_checkable
class Probe(Protocol):
    """A single dependency check.

    Attributes:
        name: Stable unique identifier, used in results and point lookups.
        timeout: Maximum seconds a run may take.
        critical: When True an unhealthy result makes the aggregate unhealthy.
        groups: Tags such as ``readiness`` or ``worker``; an empty set means
            the probe belongs to every group.
    """

    name: str
    timeout: float
    critical: bool
    groups: FrozenSet[str]

    async def run(self) -> ProbeResult:
        """Execute the check.

        Must not raise: every failure is reported as an unhealthy result.
        Safe to call repeatedly.
        """
        ...
