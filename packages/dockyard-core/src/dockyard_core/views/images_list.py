"""Images list view: every image known to the daemon."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.table import Table

from dockyard_core.docker.types import ImageSummary
from dockyard_core.formatting import age_since, human_size
from dockyard_core.tui.commands import AppCommand
from dockyard_core.tui.layout import Rect, make_panel
from dockyard_core.views.base import SelectableListView

if TYPE_CHECKING:
    from dockyard_core.docker.executor import DockerExecutor


class ImagesListView(SelectableListView):
    title = "Images"

    def __init__(self) -> None:
        super().__init__()
        self.images: list[ImageSummary] = []

    @property
    def items(self) -> Sequence[ImageSummary]:
        return self.images

    def handle_input(self, key: str, docker: "DockerExecutor") -> AppCommand | None:
        return self.handle_navigation(key)

    def refresh(self, docker: "DockerExecutor") -> None:
        images = docker.list_images(all=True)
        self.images = images
        self.clamp_selection()

    def render(self, rect: Rect) -> RenderableType:
        table = Table(expand=True, box=None, header_style="bold")
        table.add_column("Image ID", width=14, no_wrap=True)
        table.add_column("Tag", ratio=3, no_wrap=True)
        table.add_column("Created", ratio=1, no_wrap=True)
        table.add_column("Size", ratio=1, no_wrap=True, justify="right")

        # Panel borders and the header row
        for i in self.visible_range(rect.height - 3):
            image = self.images[i]
            table.add_row(
                image.short_id[:12],
                image.tag,
                age_since(image.created),
                human_size(image.size),
                style="bold yellow" if i == self.selected else "white",
            )
        return make_panel(table, self.title)
