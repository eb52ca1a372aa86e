"""Step-by-step playback of a finished schedule.

The engine always computes a schedule in one go.  A visualisation,
though, reveals it one arm movement at a time — the arm slides to the
next cylinder, the chart grows by one point, and so on.  ``Playback``
is the cursor behind that: the caller decides *when* to step (a timer,
a keypress, a test), the cursor only tracks *where* it is.

There are no threads or timers here; pacing belongs to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from py_seek.seek import ScheduleResult, SeekOperation


class Playback:
    """Cursor over the seek operations of one ``ScheduleResult``."""

    def __init__(self, result: ScheduleResult) -> None:
        """Create a cursor positioned before the first operation."""
        self._result = result
        self._step = 0

    @property
    def result(self) -> ScheduleResult:
        """Return the schedule being played back."""
        return self._result

    @property
    def step(self) -> int:
        """Return how many operations have been revealed."""
        return self._step

    @property
    def done(self) -> bool:
        """Return True once every operation has been revealed."""
        return self._step >= len(self._result.seek_operations)

    @property
    def revealed(self) -> tuple[SeekOperation, ...]:
        """Return the operations revealed so far."""
        return self._result.seek_operations[: self._step]

    @property
    def head(self) -> int | None:
        """Return the arm position after the last revealed operation.

        Before the first step this is where the arm started, or None
        for an empty schedule.
        """
        operations = self._result.seek_operations
        if not operations:
            return None
        if self._step == 0:
            return operations[0].from_cylinder
        return operations[self._step - 1].to_cylinder

    @property
    def elapsed_seek(self) -> int:
        """Return the seek distance charged so far."""
        return sum(op.seek for op in self.revealed)

    def advance(self) -> SeekOperation | None:
        """Reveal the next operation and return it (None when done)."""
        if self.done:
            return None
        operation = self._result.seek_operations[self._step]
        self._step += 1
        return operation

    def reset(self) -> None:
        """Rewind to before the first operation."""
        self._step = 0

    def __iter__(self) -> Iterator[SeekOperation]:
        """Reveal the remaining operations one by one."""
        while (operation := self.advance()) is not None:
            yield operation
