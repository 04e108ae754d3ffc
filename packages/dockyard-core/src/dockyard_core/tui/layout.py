"""
Layout factory for the dashboard screen.

Layout structure:
+-----------------------------------------------------------+
|  Status bar (1 row fixed)                                 |
+-----------------------------------------------------------+
|                                                           |
|  Current view (flexible)                                  |
|                                                           |
+-----------------------------------------------------------+
|  Status message (1 row fixed)                             |
+-----------------------------------------------------------+
"""

from typing import NamedTuple

from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel

# Rows taken by the status bar and the status message
CHROME_ROWS = 2


class Rect(NamedTuple):
    """Size of the screen area a view is drawn into."""

    width: int
    height: int


def body_rect(width: int, height: int) -> Rect:
    """Area left for the current view on a terminal of the given size."""
    return Rect(width, max(0, height - CHROME_ROWS))


def create_layout() -> Layout:
    """
    Create the three-region dashboard layout.

    Access regions via:
    - layout["status"]
    - layout["body"]
    - layout["message"]

    Returns:
        Layout with 3 named regions
    """
    layout = Layout(name="root")
    layout.split_column(
        Layout(name="status", size=1),
        Layout(name="body"),
        Layout(name="message", size=1),
    )
    return layout


def make_panel(content: RenderableType, title: str | None = None, style: str = "blue") -> Panel:
    """
    Create a bordered panel around content.

    Args:
        content: Renderable or markup text for the panel
        title: Optional panel title (will be bolded)
        style: Border style color (default "blue")
    """
    return Panel(
        content,
        title=f"[bold]{title}[/bold]" if title else None,
        border_style=style,
        padding=(0, 1),
    )
