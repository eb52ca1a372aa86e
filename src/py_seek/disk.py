"""Disk scheduling algorithms — minimising seek time for I/O requests.

When multiple processes request disk I/O, the disk arm must move
between tracks (cylinders) to service them.  The dominant cost is
**seek time** — how far the arm travels.  Disk scheduling algorithms
decide the *order* in which requests are serviced to minimise this.

Think of a disk arm like an elevator in a building:
    - **FCFS** — stop at every floor in the order people pressed buttons.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go all the way to one end, then all the way back.
    - **C-SCAN** — go all the way up, return to the bottom, go up again.

Each algorithm is available twice:
    - as a pure function (``fcfs``, ``sstf``, ``scan``, ``cscan``) that
      returns a complete ``ScheduleResult``;
    - as a policy object (``FCFSPolicy`` ...) implementing the
      ``DiskPolicy`` protocol — the Strategy pattern — so a
      ``DiskScheduler`` can swap algorithms at runtime.

None of the functions validate their input: cylinders outside the disk
simply produce a nonsensical schedule.  Use ``py_seek.geometry`` to
check requests first.
"""

from __future__ import annotations

from enum import StrEnum
from functools import reduce
from typing import TYPE_CHECKING, Protocol

from py_seek.logging import Logger, LogLevel
from py_seek.seek import ScheduleResult, SeekTrace

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

# Cylinder the arm returns to at the low edge of the disk.
_INNER_EDGE = 0


class Direction(StrEnum):
    """Initial sweep direction for SCAN.

    - RIGHT: towards higher cylinders first (the default).
    - LEFT: towards cylinder 0 first.
    """

    RIGHT = "right"
    LEFT = "left"


def _sweep(trace: SeekTrace, cylinders: Iterable[int]) -> SeekTrace:
    """Service *cylinders* in the given order, starting from *trace*."""
    return reduce(SeekTrace.visit, cylinders, trace)


def _split(requests: Sequence[int], head: int) -> tuple[list[int], list[int]]:
    """Partition requests into those below the head and the rest."""
    left = [r for r in requests if r < head]
    right = [r for r in requests if r >= head]
    return left, right


def fcfs(requests: Sequence[int], initial_head: int) -> ScheduleResult:
    """First Come, First Served — service in arrival order.

    Args:
        requests: Cylinders in the order they arrived.
        initial_head: Starting position of the arm.

    Returns:
        The schedule, with ``sequence`` equal to ``requests``.

    """
    return _sweep(SeekTrace.start(initial_head), list(requests)).result()


def sstf(requests: Sequence[int], initial_head: int) -> ScheduleResult:
    """Shortest Seek Time First — always go to the nearest request.

    Ties go to whichever candidate comes first in the remaining list,
    so the result is deterministic for a given input order.  The scan
    is quadratic in the number of requests.
    """
    remaining = list(requests)
    trace = SeekTrace.start(initial_head)
    while remaining:
        head = trace.head
        nearest = min(range(len(remaining)), key=lambda i: abs(remaining[i] - head))
        trace = trace.visit(remaining.pop(nearest))
    return trace.result()


def scan(
    requests: Sequence[int],
    initial_head: int,
    max_cylinder: int,
    direction: Direction | str = Direction.RIGHT,
) -> ScheduleResult:
    """SCAN (elevator) — sweep to the edge, then reverse.

    Requests at or above the head are on the right, requests below it
    on the left.  The arm services its own side, travels to the disk
    edge (charged, but not added to the sequence) and sweeps back.  If
    nothing waits on the far side the edge trip is skipped.

    Args:
        requests: Pending cylinders (order ignored).
        initial_head: Starting position of the arm.
        max_cylinder: Highest cylinder on the disk.
        direction: ``"right"`` (default) or ``"left"``.

    Raises:
        ValueError: If *direction* is not a known ``Direction``.

    """
    direction = Direction(direction)
    left, right = _split(requests, initial_head)
    trace = SeekTrace.start(initial_head)

    if direction is Direction.RIGHT:
        trace = _sweep(trace, sorted(right))
        if left:
            trace = _sweep(trace.travel(max_cylinder), sorted(left, reverse=True))
        return trace.result()

    trace = _sweep(trace, sorted(left, reverse=True))
    if right:
        trace = _sweep(trace.travel(_INNER_EDGE), sorted(right))
    return trace.result()


def cscan(requests: Sequence[int], initial_head: int, max_cylinder: int) -> ScheduleResult:
    """Circular SCAN — sweep right, return to cylinder 0, sweep right again.

    The return trip is charged as a full traversal of ``max_cylinder``
    cylinders rather than a free jump, so C-SCAN totals are directly
    comparable with SCAN.  With nothing below the head, neither the
    edge trip nor the return is made.
    """
    left, right = _split(requests, initial_head)
    trace = _sweep(SeekTrace.start(initial_head), sorted(right))
    if left:
        trace = trace.travel(max_cylinder).travel(_INNER_EDGE, seek=max_cylinder)
        trace = _sweep(trace, sorted(left))
    return trace.result()


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return the schedule for servicing *requests* from *head*.

        Args:
            requests: List of cylinder numbers to visit.
            head: Current position of the disk head.

        Returns:
            The complete schedule.

        """
        ...


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    The simplest policy.  Fair (no starvation), but the arm zigzags
    wildly across the disk, producing high total seek time.
    """

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in their original order."""
        return fcfs(requests, head)


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    A greedy algorithm that minimises immediate seek time.  Produces
    better total movement than FCFS, but can **starve** distant
    requests if new requests keep arriving near the head.
    """

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests ordered by nearest-first from current head."""
        return sstf(requests, head)


class SCANPolicy:
    """SCAN (Elevator algorithm) — sweep one direction, then reverse.

    Guarantees bounded wait times: no request waits more than two
    full sweeps.

    Args:
        direction: Initial sweep direction ("right" or "left").
        max_cylinder: Highest cylinder number on the disk.

    """

    def __init__(self, *, direction: Direction | str = Direction.RIGHT, max_cylinder: int = 199) -> None:
        """Create a SCAN policy with an initial direction."""
        self._direction = Direction(direction)
        self._max_cylinder = max_cylinder

    @property
    def direction(self) -> Direction:
        """Return the initial sweep direction."""
        return self._direction

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in SCAN (elevator) order."""
        return scan(requests, head, self._max_cylinder, self._direction)


class CSCANPolicy:
    """Circular SCAN — sweep right, return to the start, sweep again.

    With regular SCAN, requests in the middle of the disk are
    favoured (the arm passes them twice per cycle).  C-SCAN
    eliminates this bias at the cost of the return trip.

    Args:
        max_cylinder: Highest cylinder number on the disk.

    """

    def __init__(self, *, max_cylinder: int = 199) -> None:
        """Create a C-SCAN policy for a disk of the given size."""
        self._max_cylinder = max_cylinder

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in C-SCAN order."""
        return cscan(requests, head, self._max_cylinder)


class DiskScheduler:
    """Disk scheduler — ties a policy to a request queue.

    The disk scheduler accepts I/O requests, then runs the selected
    policy to determine service order.  Unlike the policy functions it
    keeps state between runs: the head stays where the last run left it.
    """

    def __init__(self, *, policy: DiskPolicy, head: int = 0, logger: Logger | None = None) -> None:
        """Create a disk scheduler with a policy and initial head position."""
        self._policy = policy
        self._head = head
        self._queue: list[int] = []
        self._logger = logger

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    @property
    def policy(self) -> DiskPolicy:
        """Return the current scheduling policy."""
        return self._policy

    @policy.setter
    def policy(self, value: DiskPolicy) -> None:
        """Swap the scheduling policy (Strategy pattern)."""
        self._policy = value

    @property
    def pending(self) -> list[int]:
        """Return the current request queue."""
        return list(self._queue)

    def add_request(self, cylinder: int) -> None:
        """Add an I/O request for a cylinder."""
        self._queue.append(cylinder)

    def run(self) -> ScheduleResult:
        """Run the scheduling policy on queued requests.

        Moves the head to the last serviced cylinder and clears the
        queue.  Running an empty queue returns an empty schedule.

        Returns:
            The schedule that was executed.

        """
        if not self._queue:
            return ScheduleResult.empty()
        result = self._policy.schedule(self._queue, head=self._head)
        if result.sequence:
            self._head = result.sequence[-1]
        self._queue.clear()
        if self._logger is not None:
            self._logger.log(
                LogLevel.INFO,
                f"{type(self._policy).__name__} serviced {len(result.sequence)} requests, "
                f"total seek {result.total_seek_time}",
                source="disk",
                algorithm=type(self._policy).__name__,
            )
        return result
