"""
Container logs view.

Fetches the last lines of a container's stdout and stderr (never following),
demultiplexes the stream and shows the lines in arrival order, stderr in red.
"""

from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.text import Text

from dockyard_core.docker.tty import StdErr, TtyLine, demux
from dockyard_core.tui.layout import Rect, make_panel
from dockyard_core.types import ContainerId
from dockyard_core.views.base import ScrollableView

if TYPE_CHECKING:
    from dockyard_core.docker.executor import DockerExecutor

STDOUT_STYLE = "white"
STDERR_STYLE = "red"


class ContainerLogsView(ScrollableView):
    """
    Attributes:
        container_id: Container whose logs are shown
        tail: Number of lines requested from the daemon
        lines: Decoded lines from the last refresh, None before the first one
    """

    title = "Logs"

    def __init__(self, container_id: ContainerId, tail: int = 100) -> None:
        super().__init__()
        self.container_id = container_id
        self.tail = tail
        self.lines: list[TtyLine] | None = None

    def line_count(self) -> int:
        return len(self.lines or [])

    def refresh(self, docker: "DockerExecutor") -> None:
        stream = docker.fetch_log_stream(self.container_id, tail=self.tail, stdout=True, stderr=True)
        self.lines = demux(stream)
        self.clamp_scroll()

    def render(self, rect: Rect) -> RenderableType:
        title = f"{self.title}: {self.container_id[:12]}"
        if self.lines is None:
            return make_panel(Text("Could not retrieve container logs."), title)

        text = Text(style=STDOUT_STYLE)
        visible = self.lines[self.scroll:]
        for i, line in enumerate(visible):
            style = STDERR_STYLE if isinstance(line, StdErr) else STDOUT_STYLE
            text.append(str(line), style=style)
            if i < len(visible) - 1:
                text.append("\n")
        return make_panel(text, title)
