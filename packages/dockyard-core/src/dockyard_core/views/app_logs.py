"""
Application logs view.

Shows the dashboard's own log records, captured in memory by the
LogBufferHandler installed at startup. The snapshot is taken on refresh
like any other view's data.

Keys: scrolling keys, plus "+" / "-" to raise or lower the minimum level.
"""

import logging
from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.text import Text

from dockyard_core.tui.buffer import LogBuffer, LogEntry
from dockyard_core.tui.commands import AppCommand, NoOp
from dockyard_core.tui.keyboard import Key
from dockyard_core.tui.layout import Rect, make_panel
from dockyard_core.views.base import ScrollableView

if TYPE_CHECKING:
    from dockyard_core.docker.executor import DockerExecutor

LEVELS = [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL]

_REVERSED = {
    Key.UP: Key.DOWN,
    Key.DOWN: Key.UP,
    "k": "j",
    "j": "k",
    Key.PAGE_UP: Key.PAGE_DOWN,
    Key.PAGE_DOWN: Key.PAGE_UP,
}

LEVEL_STYLES = {
    logging.DEBUG: "green",
    logging.INFO: "cyan",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "bold red",
}


class AppLogsView(ScrollableView):
    """
    Attributes:
        buffer: Shared capture buffer
        min_level: Lowest level displayed
        entries: Snapshot of the buffer taken by the last refresh
    """

    title = "Application logs"

    def __init__(self, buffer: LogBuffer, min_level: int = logging.INFO) -> None:
        super().__init__()
        self.buffer = buffer
        self.min_level = min_level
        self.entries: list[LogEntry] = []

    def line_count(self) -> int:
        return len(self.entries)

    def handle_input(self, key: str, docker: "DockerExecutor") -> AppCommand | None:
        if key in ("+", "-"):
            index = LEVELS.index(self.min_level) if self.min_level in LEVELS else 1
            index += 1 if key == "+" else -1
            self.min_level = LEVELS[min(max(index, 0), len(LEVELS) - 1)]
            self.entries = self.buffer.get_entries(min_level=self.min_level)
            self.scroll = 0
            return NoOp()
        # scroll counts lines back from the newest entry, so "up" increases it
        return self.handle_scroll(_REVERSED.get(key, key))

    def refresh(self, docker: "DockerExecutor") -> None:
        self.entries = self.buffer.get_entries(min_level=self.min_level)
        self.clamp_scroll()

    def render(self, rect: Rect) -> RenderableType:
        title = f"{self.title} (>= {logging.getLevelName(self.min_level)})"
        # Panel borders
        rows = max(rect.height - 2, 1)
        # scroll counts lines back from the newest entry
        end = max(len(self.entries) - self.scroll, 0)
        visible = self.entries[max(end - rows, 0):end]

        text = Text()
        for i, entry in enumerate(visible):
            text.append(entry.created.strftime("%H:%M:%S "), style="dim")
            text.append(f"{entry.level_name:<8} ", style=LEVEL_STYLES.get(entry.level, ""))
            text.append(f"{entry.logger}: ", style="dim")
            text.append(entry.message)
            if i < len(visible) - 1:
                text.append("\n")
        return make_panel(text, title)
