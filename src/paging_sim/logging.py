"""Allocation event log.

Every decision the memory manager makes lands here: the geometry it
started with, each page placed in a frame, each process created, each
request turned away, and each allocation rolled back.  Events are
numbered in the order they happen so a rollback can be read against
the page placements that preceded it.

Levels say how much detail an event carries:

- ``DEBUG`` — one page placed in one frame.
- ``INFO`` — memory configured, process created.
- ``WARNING`` — request rejected before any frame was touched.
- ``ERROR`` — allocation failed part-way and was rolled back.

The shell shows INFO and above by default; ``log all`` adds the page
placements and ``log <pid>`` narrows the view to one process.
"""

from dataclasses import dataclass
from enum import IntEnum
from itertools import count


class LogLevel(IntEnum):
    """How much detail an event carries (ordered, so ``>=`` filters)."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One allocation event.

    Attributes:
        seq: Position of the event in the log, starting at 1.
        level: How much detail the event carries.
        message: What happened.
        pid: The process the event concerns, or None for manager-wide events.

    """

    seq: int
    level: LogLevel
    message: str
    pid: int | None = None

    def __str__(self) -> str:
        """Format as ``#seq LEVEL [pid N] message``."""
        scope = f" [pid {self.pid}]" if self.pid is not None else ""
        return f"#{self.seq} {self.level.name}{scope} {self.message}"


class Logger:
    """Numbered, append-only record of allocation events."""

    def __init__(self) -> None:
        """Create an empty log."""
        self._entries: list[LogEntry] = []
        self._seq = count(1)

    @property
    def entries(self) -> list[LogEntry]:
        """Return every event, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        """Return the number of recorded events."""
        return len(self._entries)

    def log(self, level: LogLevel, message: str, *, pid: int | None = None) -> LogEntry:
        """Record an event and return it."""
        entry = LogEntry(seq=next(self._seq), level=level, message=message, pid=pid)
        self._entries.append(entry)
        return entry

    def filter(
        self,
        *,
        min_level: LogLevel = LogLevel.DEBUG,
        pid: int | None = None,
    ) -> list[LogEntry]:
        """Return events at or above ``min_level``, optionally for one process."""
        return [
            e
            for e in self._entries
            if e.level >= min_level and (pid is None or e.pid == pid)
        ]

    def clear(self) -> int:
        """Drop every event and return how many were dropped.

        Numbering carries on from where it was, so events logged after a
        clear are never confused with the ones that were dropped.
        """
        dropped = len(self._entries)
        self._entries.clear()
        return dropped
