"""A bounded event log that keeps only the most recent entries."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, ClassVar

MAX_LOG_ENTRIES = 10
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(Enum):
    """Severity of a log entry."""

    NORMAL = "NORMAL"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class LogEntry:
    """One recorded event."""

    time: str
    level: LogLevel
    message: str

    def __str__(self) -> str:
        return f"[{self.time}] {self.level.value}: {self.message}"


class Log:
    """Keeps the last :data:`MAX_LOG_ENTRIES` events, oldest first."""

    _instance: ClassVar[Log | None] = None

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._entries: deque[LogEntry] = deque(maxlen=MAX_LOG_ENTRIES)

    @classmethod
    def instance(cls) -> Log:
        """Return the shared log, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def message(self, level: LogLevel, text: str) -> None:
        """Record ``text`` at ``level``, dropping the oldest entry when full."""
        stamp = self._clock().strftime(TIME_FORMAT)
        self._entries.append(LogEntry(stamp, level, text))

    def entries(self) -> list[LogEntry]:
        """Return the recorded entries, oldest first."""
        return list(self._entries)

    def render(self) -> str:
        """Return the entries as printable text."""
        lines = "".join(f"{entry}\n" for entry in self._entries)
        return f"\nLast 10 events:\n{lines}\n"


_DEMO_EVENTS = [
    (LogLevel.NORMAL, "Program initialized"),
    (LogLevel.WARNING, "Low memory warning"),
    (LogLevel.ERROR, "Critical error: File not found"),
    (LogLevel.NORMAL, "Loading modules..."),
    (LogLevel.NORMAL, "User logged in"),
    (LogLevel.WARNING, "High CPU usage"),
    (LogLevel.NORMAL, "Data saved successfully"),
    (LogLevel.ERROR, "Network connection lost"),
    (LogLevel.NORMAL, "Backup started"),
    (LogLevel.NORMAL, "Processing complete"),
    (LogLevel.WARNING, "Disk space low"),
]


def main(argv: list[str] | None = None) -> int:
    """Record a series of sample events and print the most recent ones."""
    log = Log.instance()
    for level, text in _DEMO_EVENTS:
        log.message(level, text)
    sys.stdout.write(log.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())