"""Daemon info view: host and engine details reported by the daemon."""

from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.text import Text

from dockyard_core.docker.types import DaemonInfo
from dockyard_core.formatting import human_size
from dockyard_core.tui.commands import AppCommand
from dockyard_core.tui.layout import Rect, make_panel
from dockyard_core.views.base import View

if TYPE_CHECKING:
    from dockyard_core.docker.executor import DockerExecutor

SECTION_STYLE = "bold blue"


class DaemonInfoView(View):
    title = "Docker info"

    def __init__(self) -> None:
        self.info: DaemonInfo | None = None

    def handle_input(self, key: str, docker: "DockerExecutor") -> AppCommand | None:
        return None

    def refresh(self, docker: "DockerExecutor") -> None:
        self.info = docker.info()

    def render(self, rect: Rect) -> RenderableType:
        info = self.info
        if info is None:
            return make_panel(
                Text("Could not retrieve information from the Docker daemon."), self.title
            )

        text = Text()
        text.append("Host details\n", style=SECTION_STYLE)
        text.append(f"Hostname:       {info.name}\n")
        text.append(f"OS Information: {info.operating_system}\n")
        text.append(f"Kernel Version: {info.kernel_version}\n")
        text.append(f"Total CPU:      {info.n_cpu}\n")
        text.append(f"Total Memory:   {human_size(info.mem_total)}\n")
        text.append("\n")
        text.append("Engine details\n", style=SECTION_STYLE)
        text.append(f"Server Version:       {info.server_version}\n")
        text.append(f"Root Directory:       {info.docker_root_dir}\n")
        text.append(f"Storage Driver:       {info.driver}\n")
        text.append(
            f"Containers:           {info.containers} "
            f"({info.containers_running} running, {info.containers_paused} paused, "
            f"{info.containers_stopped} stopped)\n"
        )
        text.append(f"Images:               {info.images}")
        return make_panel(text, self.title)
