"""
In-memory capture of the application's own log records.

The dashboard owns the terminal, so log output cannot go to stderr while it
runs. Instead a LogBufferHandler installed on the root logger stores records
in a LogBuffer ring buffer, which the application logs view displays.

- Uses deque(maxlen=N) for automatic oldest-removal
- Thread-safe append (deque guarantee in CPython), records may arrive from
  the producer threads as well as the UI thread
"""

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LogEntry:
    """
    One captured log record.

    Attributes:
        created: When the record was emitted
        level: Numeric logging level
        logger: Name of the emitting logger
        message: Fully formatted message text
    """

    created: datetime
    level: int
    logger: str
    message: str

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)


class LogBuffer:
    """
    Fixed-size ring buffer of log entries.

    Example:
        buffer = LogBuffer(maxlen=500)
        buffer.append(entry)
        buffer.get_entries(n=20, min_level=logging.WARNING)
    """

    def __init__(self, maxlen: int = 1000) -> None:
        """
        Initialize buffer with maximum entry count.

        Args:
            maxlen: Maximum number of entries to keep (default 1000)
        """
        self._buffer: deque[LogEntry] = deque(maxlen=maxlen)

    def append(self, entry: LogEntry) -> None:
        self._buffer.append(entry)

    def get_entries(self, n: int | None = None, min_level: int = logging.NOTSET) -> list[LogEntry]:
        """
        Get the last n entries at or above min_level (or all if n is None).

        Returns:
            Entries, newest last
        """
        entries = [e for e in list(self._buffer) if e.level >= min_level]
        if n is not None:
            return entries[-n:]
        return entries

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._buffer))

    def clear(self) -> None:
        self._buffer.clear()


class LogBufferHandler(logging.Handler):
    """logging.Handler that appends records to a LogBuffer."""

    def __init__(self, buffer: LogBuffer, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.buffer = buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.buffer.append(
                LogEntry(
                    created=datetime.fromtimestamp(record.created),
                    level=record.levelno,
                    logger=record.name,
                    message=self.format(record),
                )
            )
        except Exception:
            self.handleError(record)


def install_log_capture(
    buffer: LogBuffer, level: int | str = logging.INFO
) -> LogBufferHandler:
    """
    Route all logging into buffer.

    Replaces the root logger's handlers so nothing is written to the
    terminal while the dashboard is running.

    Args:
        buffer: Destination buffer
        level: Root logger level

    Returns:
        The installed handler
    """
    handler = LogBufferHandler(buffer)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    # httpx/httpcore log every request at INFO/DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return handler
