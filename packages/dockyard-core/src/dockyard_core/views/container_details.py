"""Container details view: the full inspect payload of one container."""

import json
from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.text import Text

from dockyard_core.docker.types import ContainerDetails
from dockyard_core.tui.layout import Rect, make_panel
from dockyard_core.types import ContainerId
from dockyard_core.views.base import ScrollableView

if TYPE_CHECKING:
    from dockyard_core.docker.executor import DockerExecutor


class ContainerDetailsView(ScrollableView):
    title = "Container details"

    def __init__(self, container_id: ContainerId) -> None:
        super().__init__()
        self.container_id = container_id
        self.details: ContainerDetails | None = None
        self.lines: list[str] = []

    def line_count(self) -> int:
        return len(self.lines)

    def refresh(self, docker: "DockerExecutor") -> None:
        details = docker.inspect_container(self.container_id)
        payload = details.model_dump(mode="json", by_alias=True)
        self.details = details
        self.lines = json.dumps(payload, indent=2, sort_keys=True).splitlines()
        self.clamp_scroll()

    def render(self, rect: Rect) -> RenderableType:
        if self.details is None:
            body = Text("Could not retrieve container details.")
        else:
            body = Text("\n".join(self.lines[self.scroll:]))
        return make_panel(body, f"{self.title}: {self.container_id[:12]}")
