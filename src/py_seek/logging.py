"""Scheduling audit log.

Every schedule computed through the dispatcher, the ``DiskScheduler``
or the web API can be recorded here, giving a trail of which policy
ran, on how many requests, and what it cost.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — one record, tagged with the component that wrote it
  and, when there is one, the policy involved.
- **Logger** — an append-only in-memory log, queryable by level,
  component and policy.

Logging is opt-in: the engine never writes to a global logger, callers
pass a ``Logger`` to the parts that should record.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries.

    IntEnum, so minimum-level filtering is a plain ``>=``.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single scheduling event.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (``"dispatch"``,
            ``"disk"`` or ``"web"``).
        algorithm: The policy that ran or was substituted, if any.

    """

    level: LogLevel
    message: str
    source: str
    algorithm: str | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source(algorithm): message``."""
        tag = self.source if self.algorithm is None else f"{self.source}({self.algorithm})"
        return f"[{self.level.name}] {tag}: {self.message}"


class Logger:
    """Append-only buffer of scheduling events."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    def __len__(self) -> int:
        """Return the number of recorded entries."""
        return len(self._entries)

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        algorithm: str | None = None,
    ) -> None:
        """Record an event.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.
            algorithm: Policy the event concerns, if any.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source, algorithm=algorithm))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        algorithm: str | None = None,
    ) -> list[LogEntry]:
        """Return the entries that match every given criterion."""
        return [
            entry
            for entry in self._entries
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
            and (algorithm is None or entry.algorithm == algorithm)
        ]

    def algorithms(self) -> list[str]:
        """Return each policy mentioned in the log, in first-seen order."""
        return list(dict.fromkeys(e.algorithm for e in self._entries if e.algorithm is not None))

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
