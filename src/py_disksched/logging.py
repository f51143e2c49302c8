"""Run log — a structured record of what the scheduler did.

Every run leaves a trail: which request file was read (or generated),
which policy ran, how far the head travelled.  Rather than printing as
it goes, the engine appends entries to an in-memory buffer owned by
the caller.  The CLI decides afterwards how much of it to show:

- nothing by default,
- INFO and above with ``-v`` (files loaded, one line per policy),
- everything with ``-vv`` (adds generation seeds and run parameters).

Entries are tagged with the component that produced them (``disk`` or
``requests``) so a caller can also pull out one component's history.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels, ordered so ``>=`` means "at least this severe"."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @classmethod
    def for_verbosity(cls, count: int) -> "LogLevel | None":
        """Map a ``-v`` count to the lowest level worth showing.

        Returns ``None`` for zero, meaning the log stays hidden.
        """
        if count <= 0:
            return None
        return cls.INFO if count == 1 else cls.DEBUG


@dataclass(frozen=True)
class LogEntry:
    """One event in a run.

    Attributes:
        level: How much the event matters.
        source: Component that recorded it (``"disk"``, ``"requests"``).
        message: What happened.

    """

    level: LogLevel
    source: str
    message: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only run log shared by the loader and the scheduler."""

    def __init__(self) -> None:
        """Create an empty run log."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of every entry, oldest first."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Record *message* from *source* at *level*."""
        self._entries.append(LogEntry(level=level, source=source, message=message))

    def debug(self, message: str, *, source: str) -> None:
        """Record a DEBUG entry."""
        self.log(LogLevel.DEBUG, message, source=source)

    def info(self, message: str, *, source: str) -> None:
        """Record an INFO entry."""
        self.log(LogLevel.INFO, message, source=source)

    def filter(
        self,
        *,
        min_level: LogLevel = LogLevel.DEBUG,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries at or above *min_level*, optionally from one *source*."""
        return [
            entry
            for entry in self._entries
            if entry.level >= min_level and (source is None or entry.source == source)
        ]

    def render(self, *, min_level: LogLevel = LogLevel.DEBUG) -> str:
        """Return the entries at or above *min_level*, one per line."""
        return "\n".join(str(entry) for entry in self.filter(min_level=min_level))
