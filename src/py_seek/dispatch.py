"""Dispatcher — pick a policy by name, or run them all side by side.

A UI hands the engine a policy name straight from a dropdown.  The
dispatcher maps that name onto one of the four policy functions in
``py_seek.disk``:

- ``run_algorithm`` — run one policy.  An unknown name falls back to
  FCFS rather than failing; callers that need strict checking use
  ``Algorithm.parse(name, strict=True)`` first.
- ``get_all_results`` — run every policy on the same input for a
  comparison chart (SCAN always sweeps right here).
- ``best_algorithm`` — the policy with the lowest total seek time.
- ``ALGORITHM_INFO`` — short descriptions, pros and cons for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from py_seek.disk import Direction, cscan, fcfs, scan, sstf
from py_seek.logging import Logger, LogLevel

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from py_seek.seek import ScheduleResult


class Algorithm(StrEnum):
    """The four scheduling policies, by their display names."""

    FCFS = "FCFS"
    SSTF = "SSTF"
    SCAN = "SCAN"
    CSCAN = "C-SCAN"

    @classmethod
    def parse(cls, name: str | Algorithm, *, strict: bool = False) -> Algorithm:
        """Return the policy called *name*.

        Names must match exactly, so ``"scan"`` is not SCAN and falls
        back to FCFS like any other unknown name.

        Args:
            name: Display name such as ``"SSTF"`` or ``"C-SCAN"``.
            strict: Raise on an unknown name instead of returning FCFS.

        Raises:
            ValueError: If *strict* and *name* is not a policy.

        """
        key = str(name)
        for member in cls:
            if member.value == key:
                return member
        if strict:
            msg = f"Unknown scheduling algorithm: {name!r}"
            raise ValueError(msg)
        return cls.FCFS


@dataclass(frozen=True)
class AlgorithmInfo:
    """Human-readable summary of one policy."""

    name: str
    description: str
    pros: tuple[str, ...]
    cons: tuple[str, ...]


ALGORITHM_INFO: Mapping[Algorithm, AlgorithmInfo] = {
    Algorithm.FCFS: AlgorithmInfo(
        name="First Come First Serve",
        description="Processes requests in the order they arrive. Simple but may result in high seek times.",
        pros=("Simple implementation", "Fair scheduling", "No starvation"),
        cons=("High average seek time", "Wild arm movement", "Not efficient"),
    ),
    Algorithm.SSTF: AlgorithmInfo(
        name="Shortest Seek Time First",
        description="Always services the request closest to the current head position.",
        pros=("Better than FCFS", "Reduces total seek time", "More efficient"),
        cons=("May cause starvation", "Not optimal", "Overhead in calculating"),
    ),
    Algorithm.SCAN: AlgorithmInfo(
        name="SCAN (Elevator)",
        description="Moves in one direction servicing requests until reaching the end, then reverses.",
        pros=("No starvation", "Uniform wait time", "Better than SSTF"),
        cons=("Long wait for recently visited", "Not optimal for clustered requests"),
    ),
    Algorithm.CSCAN: AlgorithmInfo(
        name="Circular SCAN",
        description="Like SCAN but returns to the start after reaching the end, providing uniform wait time.",
        pros=("Uniform wait time", "No starvation", "Predictable"),
        cons=("More movement than SCAN", "Not optimal for all patterns"),
    ),
}


def _run(algorithm: Algorithm, requests: Sequence[int], initial_head: int, max_cylinder: int) -> ScheduleResult:
    """Run one known policy with default options."""
    match algorithm:
        case Algorithm.FCFS:
            return fcfs(requests, initial_head)
        case Algorithm.SSTF:
            return sstf(requests, initial_head)
        case Algorithm.SCAN:
            return scan(requests, initial_head, max_cylinder, Direction.RIGHT)
        case Algorithm.CSCAN:
            return cscan(requests, initial_head, max_cylinder)


def run_algorithm(
    policy: str | Algorithm,
    requests: Sequence[int],
    initial_head: int,
    max_cylinder: int,
    *,
    logger: Logger | None = None,
) -> ScheduleResult:
    """Run the policy named *policy* and return its schedule.

    Unknown names silently fall back to FCFS so a UI never gets an
    error back; when a *logger* is given the fallback is recorded as a
    warning.
    """
    algorithm = Algorithm.parse(policy)
    if logger is not None and str(policy) != algorithm.value:
        logger.log(
            LogLevel.WARNING,
            f"unknown algorithm {policy!r}, using FCFS",
            source="dispatch",
            algorithm=str(algorithm),
        )

    result = _run(algorithm, requests, initial_head, max_cylinder)

    if logger is not None:
        logger.log(
            LogLevel.INFO,
            f"{algorithm} serviced {len(result.sequence)} requests from {initial_head}, "
            f"total seek {result.total_seek_time}",
            source="dispatch",
            algorithm=str(algorithm),
        )
    return result


def get_all_results(
    requests: Sequence[int],
    initial_head: int,
    max_cylinder: int,
) -> dict[Algorithm, ScheduleResult]:
    """Run every policy on identical input, in ``Algorithm`` order."""
    return {algorithm: _run(algorithm, requests, initial_head, max_cylinder) for algorithm in Algorithm}


def best_algorithm(results: Mapping[Algorithm, ScheduleResult]) -> Algorithm:
    """Return the policy with the lowest total seek time.

    Ties go to whichever policy comes first in *results*.

    Raises:
        ValueError: If *results* is empty.

    """
    if not results:
        msg = "No results to compare"
        raise ValueError(msg)
    return min(results, key=lambda algorithm: results[algorithm].total_seek_time)
