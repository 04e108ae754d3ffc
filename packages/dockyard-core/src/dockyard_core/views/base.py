"""
Common contract for dashboard views.

A view is one screen of the dashboard. Each view knows how to:
- handle_input: react to a key, returning an AppCommand, or None when the
  key is not meant for this view
- refresh: re-fetch its data from the daemon and replace its cache
- draw: render its current state into a screen region

draw() is a pure function of the view's state: it never calls the daemon
and never mutates the view.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.layout import Layout

from dockyard_core.tui.commands import AppCommand, NoOp
from dockyard_core.tui.keyboard import Key
from dockyard_core.tui.layout import Rect

if TYPE_CHECKING:
    from dockyard_core.docker.executor import DockerExecutor

PAGE_SIZE = 10


class View(ABC):
    """Base class for all views."""

    title: str = ""

    @abstractmethod
    def handle_input(self, key: str, docker: "DockerExecutor") -> AppCommand | None:
        """
        Handle a key press.

        Returns:
            An AppCommand (possibly NoOp) if the key was handled, None otherwise
        """

    def refresh(self, docker: "DockerExecutor") -> None:
        """
        Refresh the data displayed by this view.

        The default implementation does nothing. Implementations replace
        their cache only once the new data has been fetched, so a failing
        call (DockerError) leaves the previous data on screen.
        """

    @abstractmethod
    def render(self, rect: Rect) -> RenderableType:
        """Build the renderable for this view's current state."""

    def draw(self, region: Layout, rect: Rect) -> None:
        """Draw the view into region, which has the size rect."""
        region.update(self.render(rect))


class ScrollableView(View):
    """
    View showing a block of text with a vertical scroll offset.

    The offset is clamped to [0, line_count() - 1], so the last line always
    stays on screen. Keys: k/up, j/down, page up/down, home.
    """

    def __init__(self) -> None:
        self.scroll = 0

    def line_count(self) -> int:
        """Number of lines the view can scroll through."""
        return 0

    def clamp_scroll(self) -> None:
        """Keep scroll inside the content after it was replaced."""
        self.scroll = min(max(self.scroll, 0), max(self.line_count() - 1, 0))

    def handle_scroll(self, key: str) -> AppCommand | None:
        if key in (Key.UP, "k"):
            self.scroll -= 1
        elif key in (Key.DOWN, "j"):
            self.scroll += 1
        elif key == Key.PAGE_UP:
            self.scroll -= PAGE_SIZE
        elif key == Key.PAGE_DOWN:
            self.scroll += PAGE_SIZE
        elif key == Key.HOME:
            self.scroll = 0
        else:
            return None
        self.clamp_scroll()
        return NoOp()

    def handle_input(self, key: str, docker: "DockerExecutor") -> AppCommand | None:
        return self.handle_scroll(key)


class SelectableListView(View):
    """
    View showing a list of items with one selected entry.

    Movement is clamped at both ends (no wraparound). Keys: k/up, j/down,
    page up/down, home, end.
    """

    def __init__(self) -> None:
        self.selected = 0

    @property
    @abstractmethod
    def items(self) -> Sequence:
        """The cached list the selection indexes into."""

    def move_selection(self, delta: int) -> None:
        if not self.items:
            self.selected = 0
            return
        self.selected = min(max(self.selected + delta, 0), len(self.items) - 1)

    def clamp_selection(self) -> None:
        """Keep selected inside the list after the cache was replaced."""
        if not self.items:
            self.selected = 0
        elif self.selected >= len(self.items):
            self.selected = len(self.items) - 1

    def handle_navigation(self, key: str) -> AppCommand | None:
        if key in (Key.DOWN, "j"):
            self.move_selection(1)
        elif key in (Key.UP, "k"):
            self.move_selection(-1)
        elif key == Key.PAGE_DOWN:
            self.move_selection(PAGE_SIZE)
        elif key == Key.PAGE_UP:
            self.move_selection(-PAGE_SIZE)
        elif key == Key.HOME:
            self.selected = 0
        elif key == Key.END:
            self.selected = max(len(self.items) - 1, 0)
        else:
            return None
        return NoOp()

    def visible_range(self, rows: int) -> range:
        """Indices of the items to show in `rows` lines, keeping the selection visible."""
        rows = max(rows, 1)
        start = max(0, self.selected - rows + 1)
        return range(start, min(len(self.items), start + rows))
