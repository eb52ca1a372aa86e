"""Seek model — head movements and the schedules built from them.

Every disk scheduling policy boils down to the same bookkeeping: the
arm sits on a cylinder, moves to the next one, and the distance it
travels is the **seek** for that step.  Summing the seeks gives the
total cost of a schedule.

- **SeekOperation** — one arm movement (from, to, distance).
- **ScheduleResult** — the finished schedule: service order, every
  movement in time order, and the aggregate statistics.
- **SeekTrace** — the running state while a policy builds a schedule.

Design choices:
    - **Frozen dataclasses** — a finished schedule never changes, so
      callers can share and compare results freely.
    - **SeekTrace is a value, not a mutable accumulator** — each step
      returns a new trace, so a policy is a plain fold over its service
      order and there is no state to leak between calls.
    - **Boundary trips are flagged** — SCAN and C-SCAN travel to the
      disk edge without servicing anything; that travel is charged to
      the total but the edge never joins the service order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Throughput is reported as requests serviced per this many cylinders.
_THROUGHPUT_SCALE = 100


@dataclass(frozen=True)
class SeekOperation:
    """A single movement of the disk arm.

    Attributes:
        from_cylinder: Where the arm started.
        to_cylinder: Where the arm stopped.
        seek: Distance charged for the move (normally ``abs(to - from)``).
        is_boundary: True when the move services no request.

    """

    from_cylinder: int
    to_cylinder: int
    seek: int
    is_boundary: bool = False

    def to_dict(self) -> dict[str, int]:
        """Return the ``{"from", "to", "seek"}`` mapping used by UIs."""
        return {"from": self.from_cylinder, "to": self.to_cylinder, "seek": self.seek}

    def __str__(self) -> str:
        """Format as ``from -> to (seek)``."""
        return f"{self.from_cylinder} -> {self.to_cylinder} ({self.seek})"


@dataclass(frozen=True)
class ScheduleResult:
    """The complete output of one scheduling run.

    Attributes:
        sequence: Cylinders in the order they were serviced.
        seek_operations: Every arm movement, including boundary trips.
        total_seek_time: Sum of all charged seek distances.
        average_seek_time: ``total_seek_time / len(sequence)``, or 0.

    """

    sequence: tuple[int, ...]
    seek_operations: tuple[SeekOperation, ...]
    total_seek_time: int
    average_seek_time: float

    @classmethod
    def empty(cls) -> ScheduleResult:
        """Return the result of scheduling no requests."""
        return cls(sequence=(), seek_operations=(), total_seek_time=0, average_seek_time=0.0)

    @property
    def throughput(self) -> float:
        """Return requests serviced per 100 cylinders of travel."""
        if self.total_seek_time <= 0:
            return 0.0
        return len(self.sequence) / self.total_seek_time * _THROUGHPUT_SCALE

    @property
    def final_head(self) -> int | None:
        """Return where the arm ends up, or None if it never moved."""
        if not self.seek_operations:
            return None
        return self.seek_operations[-1].to_cylinder

    @property
    def boundary_operations(self) -> list[SeekOperation]:
        """Return the movements that serviced no request."""
        return [op for op in self.seek_operations if op.is_boundary]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping in the shape the charts consume."""
        return {
            "sequence": list(self.sequence),
            "seekOperations": [op.to_dict() for op in self.seek_operations],
            "totalSeekTime": self.total_seek_time,
            "averageSeekTime": self.average_seek_time,
        }


@dataclass(frozen=True)
class SeekTrace:
    """Immutable running state of a schedule under construction.

    Start with ``SeekTrace.start(head)`` and thread it through
    ``visit`` / ``travel`` calls (typically via ``functools.reduce``),
    then call ``result()``.
    """

    head: int
    sequence: tuple[int, ...] = ()
    operations: tuple[SeekOperation, ...] = ()
    total: int = 0

    @classmethod
    def start(cls, head: int) -> SeekTrace:
        """Create a trace with the arm parked at *head*."""
        return cls(head=head)

    def visit(self, cylinder: int) -> SeekTrace:
        """Move to *cylinder* and service the request there."""
        seek = abs(cylinder - self.head)
        return SeekTrace(
            head=cylinder,
            sequence=(*self.sequence, cylinder),
            operations=(*self.operations, SeekOperation(self.head, cylinder, seek)),
            total=self.total + seek,
        )

    def travel(self, cylinder: int, *, seek: int | None = None) -> SeekTrace:
        """Move to *cylinder* without servicing anything.

        Args:
            cylinder: Destination of the boundary trip.
            seek: Distance to charge; defaults to the actual distance.

        """
        charged = abs(cylinder - self.head) if seek is None else seek
        operation = SeekOperation(self.head, cylinder, charged, is_boundary=True)
        return SeekTrace(
            head=cylinder,
            sequence=self.sequence,
            operations=(*self.operations, operation),
            total=self.total + charged,
        )

    def result(self) -> ScheduleResult:
        """Freeze the trace into a ``ScheduleResult``."""
        count = len(self.sequence)
        return ScheduleResult(
            sequence=self.sequence,
            seek_operations=self.operations,
            total_seek_time=self.total,
            average_seek_time=self.total / count if count else 0.0,
        )
