"""Domain rules for evaluating probe results.

Pure functions shared by the aggregator: group membership, overall status
escalation and run statistics.
"""

from collections import Counter
from typing import AbstractSet, Iterable, List, Sequence, Tuple

from pulsecheck.domain.entities.errors import ProbeConfigurationError
from pulsecheck.domain.entities.health import (
    ProbeResult,
    ProbeStatus,
    RunStatistics,
    SlowestCheck,
)

SLOW_CHECK_THRESHOLD = 1.0
DURATION_PRECISION = 3


def belongs_to_group(groups: AbstractSet[str], group: str) -> bool:
    """A probe without groups belongs to every group."""
    return not groups or group in groups


def resolve_overall_status(pairs: Iterable[Tuple[bool, ProbeResult]]) -> ProbeStatus:
    """Aggregate ``(critical, result)`` pairs into an overall status.

    Only a critical probe reporting UNHEALTHY makes the aggregate UNHEALTHY;
    degraded results and non-critical failures leave it HEALTHY. Stops at the
    first match, so lazy iterables are consumed only as far as needed.
    """
    for critical, result in pairs:
        if critical and result.is_unhealthy:
            return ProbeStatus.UNHEALTHY
    return ProbeStatus.HEALTHY


def compute_statistics(results: Sequence[ProbeResult]) -> RunStatistics:
    """Summarize durations of one run.

    The slowest check is the first result holding the maximum duration.
    """
    if not results:
        return RunStatistics()

    slowest = results[0]
    total = 0.0
    slow = 0
    for result in results:
        total += result.duration
        if result.duration > SLOW_CHECK_THRESHOLD:
            slow += 1
        if result.duration > slowest.duration:
            slowest = result

    return RunStatistics(
        total_checks=len(results),
        slow_checks=slow,
        average_duration=round(total / len(results), DURATION_PRECISION),
        slowest_check=SlowestCheck(
            name=slowest.name,
            duration=round(slowest.duration, DURATION_PRECISION),
        ),
    )


def validate_probe_names(names: Iterable[str]) -> None:
    """Ensure every probe name is non-empty and unique.

    Raises:
        ProbeConfigurationError: If a name is empty or registered twice.
    """

    errors: List[str] = []
    counts = Counter(names)

    if "" in counts:
        errors.append("Health check names must not be empty.")
    for name, count in counts.items():
        if name and count > 1:
            errors.append(f"Health check '{name}' is registered {count} times.")

    if errors:
        raise ProbeConfigurationError(
            "Invalid health check registration", details={"errors": errors}
        )
