"""
Event types for the dashboard's event channel, and the Ticker producer.

The event loop consumes a single unbounded FIFO channel
(queue.SimpleQueue) fed by two producer threads:
- KeyReader sends Input(key) for every key press
- Ticker sends Tick at a fixed interval for passive refresh
"""

import logging
import queue
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Input:
    """A key press from the keyboard reader."""

    key: str


@dataclass(frozen=True)
class Tick:
    """Periodic timer event."""


AppEvent = Input | Tick

EventChannel = queue.SimpleQueue
"""Unbounded multi-producer, single-consumer FIFO of AppEvent."""


class Ticker:
    """
    Periodic Tick producer thread.

    Sleeps for the interval, then sends a Tick, until stopped.
    Ticks are sent regardless of whether the consumer has caught up.

    Example:
        ticker = Ticker(events, interval=2.0)
        ticker.start()
        # Later:
        ticker.stop()
    """

    def __init__(self, events: EventChannel, interval: float = 2.0) -> None:
        """
        Initialize ticker.

        Args:
            events: Channel to send Tick events to
            interval: Seconds between ticks
        """
        self._events = events
        self._interval = interval
        self._shutdown = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        self._thread = threading.Thread(target=self.run, name="ticker", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 1.0) -> None:
        self._shutdown.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def run(self) -> None:
        # wait() returns True only once stop() has been called
        while not self._shutdown.wait(self._interval):
            self._events.put(Tick())
            logger.debug("Tick")
