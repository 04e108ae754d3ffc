"""Help view: static key reference."""

from rich.console import RenderableType
from rich.text import Text

from dockyard_core.tui.layout import Rect, make_panel
from dockyard_core.views.base import ScrollableView

HELP_LINES = [
    "KEYS:",
    "",
    "?      - help",
    "q      - exit view (quits from the last view)",
    "r      - refresh current view",
    "i      - switch to view: images list",
    "v      - switch to view: docker info",
    "L      - switch to view: application logs",
    "k / ↑  - up",
    "j / ↓  - down",
    "PgUp / PgDn / Home / End - move faster",
    "a      - toggle all / running only   in view: container list",
    "s      - stop container              in view: container list",
    "S      - start container             in view: container list",
    "p      - pause container             in view: container list",
    "P      - unpause container           in view: container list",
    "d      - delete container            in view: container list",
    "l      - container logs              in view: container list",
    "⏎      - container details           in view: container list",
    "+ / -  - raise / lower minimum level in view: application logs",
]


class HelpView(ScrollableView):
    title = "Help"

    def line_count(self) -> int:
        return len(HELP_LINES)

    def render(self, rect: Rect) -> RenderableType:
        return make_panel(Text("\n".join(HELP_LINES[self.scroll:])), self.title)
