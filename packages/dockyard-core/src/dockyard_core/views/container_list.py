"""
Container list view: the dashboard's home screen.

Shows a table of containers with one selected row, and a summary of the
selected container below it. Lifecycle actions apply to the selected
container and block until the daemon answers.

Keys:
- k/j, up/down, page up/down, home/end: move the selection (clamped)
- a: toggle between all containers and running ones only
- enter: container details, l: container logs
- p/P: pause/unpause, S/s: start/stop, d: delete
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.table import Table
from rich.text import Text

from dockyard_core.docker.exceptions import DockerError
from dockyard_core.docker.types import ContainerSummary
from dockyard_core.formatting import age_since, human_size
from dockyard_core.tui.commands import (
    AppCommand,
    ErrorMsg,
    NoOp,
    Refresh,
    SwitchToView,
    ViewType,
)
from dockyard_core.tui.keyboard import Key
from dockyard_core.tui.layout import Rect, make_panel
from dockyard_core.types import LifecycleOp
from dockyard_core.views.base import SelectableListView

if TYPE_CHECKING:
    from dockyard_core.docker.executor import DockerExecutor

logger = logging.getLogger(__name__)

ACTION_KEYS = {
    "p": LifecycleOp.PAUSE,
    "P": LifecycleOp.UNPAUSE,
    "S": LifecycleOp.START,
    "s": LifecycleOp.STOP,
    "d": LifecycleOp.DELETE,
}

SELECTED_STYLE = "bold yellow"
RUNNING_STYLE = "green"
NORMAL_STYLE = "white"

# Table share of the view height, the rest shows the selected container
TABLE_RATIO = 0.7


class ContainerListView(SelectableListView):
    """
    List of containers with lifecycle actions.

    Attributes:
        containers: Cached container list, replaced on each refresh
        selected: Index of the selected container
        only_running: Whether to list running containers only
    """

    title = "Containers"

    def __init__(self) -> None:
        super().__init__()
        self.containers: list[ContainerSummary] = []
        self.only_running = False

    @property
    def items(self) -> Sequence[ContainerSummary]:
        return self.containers

    def get_selected_container(self) -> ContainerSummary | None:
        if 0 <= self.selected < len(self.containers):
            return self.containers[self.selected]
        return None

    def handle_input(self, key: str, docker: "DockerExecutor") -> AppCommand | None:
        command = self.handle_navigation(key)
        if command is not None:
            return command

        if key == "a":
            self.only_running = not self.only_running
            return Refresh()

        if key in (Key.ENTER, "l"):
            container = self.get_selected_container()
            if container is None:
                return NoOp()
            if key == "l":
                return SwitchToView(ViewType.container_logs(container.id))
            return SwitchToView(ViewType.container_details(container.id))

        op = ACTION_KEYS.get(key)
        if op is not None:
            return self._run_lifecycle_op(docker, op)

        return None

    def _run_lifecycle_op(self, docker: "DockerExecutor", op: LifecycleOp) -> AppCommand:
        container = self.get_selected_container()
        if container is None:
            return NoOp()
        try:
            docker.container_lifecycle_op(container.id, op)
        except DockerError as e:
            logger.warning("Failed to %s container %s: %s", op.value, container.id[:12], e)
            return ErrorMsg(f"Failed to {op.value} container {container.id[:12]}: {e}")
        return Refresh()

    def refresh(self, docker: "DockerExecutor") -> None:
        containers = docker.list_containers(all=not self.only_running)
        self.containers = containers
        self.clamp_selection()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_table(self, rows: int) -> Table:
        table = Table(expand=True, box=None, header_style="bold")
        table.add_column("Container ID", width=15, no_wrap=True)
        table.add_column("Image", ratio=2, no_wrap=True)
        table.add_column("Command", ratio=3, no_wrap=True)
        table.add_column("Status", ratio=2, no_wrap=True)

        for i in self.visible_range(rows):
            c = self.containers[i]
            if i == self.selected:
                style = SELECTED_STYLE
            elif c.is_running:
                style = RUNNING_STYLE
            else:
                style = NORMAL_STYLE
            table.add_row(c.id[:12], c.image, c.command, c.status, style=style)
        return table

    def _render_info(self) -> RenderableType:
        c = self.get_selected_container()
        if c is None:
            return Text("No containers." if not self.only_running else "No running containers.", style="dim")

        ports = sorted(c.ports, key=lambda p: p.private_port)
        labels = ", ".join(f"{k}={v}" for k, v in sorted((c.labels or {}).items()))
        fields = [
            ("Created:", age_since(c.created)),
            ("Command:", c.command),
            ("Id:", c.id),
            ("Image:", c.image),
            ("Labels:", labels or "-"),
            ("Names:", ", ".join(name.lstrip("/") for name in c.names)),
            ("Ports:", "\n".join(str(p) for p in ports) or "-"),
            ("Status:", c.status),
            ("SizeRW:", human_size(c.size_rw)),
            ("SizeRootFs:", human_size(c.size_root_fs)),
        ]
        table = Table(box=None, show_header=False, expand=True, pad_edge=False)
        table.add_column("key", style="bold", width=15)
        table.add_column("value")
        for key, value in fields:
            table.add_row(key, value)
        return table

    def render(self, rect: Rect) -> RenderableType:
        table_height = max(int(rect.height * TABLE_RATIO), 3)
        # Panel borders and the header row
        rows = table_height - 3
        filter_name = "running" if self.only_running else "all"
        layout = Layout()
        layout.split_column(
            Layout(
                make_panel(self._render_table(rows), f"{self.title} ({filter_name})"),
                size=table_height,
            ),
            Layout(make_panel(Group(self._render_info()))),
        )
        return layout
