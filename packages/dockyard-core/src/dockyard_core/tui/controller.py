"""
App controller: view-stack navigation and command interpretation.

The controller owns:
- The view stack: the top view is the only one drawn and given input
- The global key table, checked before the current view sees a key
- The status message shown on the bottom line
- Daemon-wide info for the status bar

Key handling never performs navigation itself: global bindings and views
return AppCommands, and execute() applies them. Popping the last view is the
exit signal; the stack is never empty while the dashboard runs.

Only the top view is refreshed on ticks. Views lower in the stack keep the
data from when they were last visible and are rebuilt from scratch when
opened again.

All methods run on the event loop's consumer thread, so no locking is
needed here. Daemon calls block until they return.
"""

import logging

from rich.layout import Layout
from rich.text import Text

from dockyard_core.docker.exceptions import DockerError
from dockyard_core.docker.executor import DockerExecutor
from dockyard_core.docker.types import DaemonInfo, VersionInfo
from dockyard_core.tui.buffer import LogBuffer
from dockyard_core.tui.commands import (
    AppCommand,
    ErrorMsg,
    ExitView,
    NoOp,
    Refresh,
    SwitchToView,
    ViewType,
)
from dockyard_core.tui.layout import Rect, body_rect, create_layout
from dockyard_core.views import View, create_view

logger = logging.getLogger(__name__)

APP_NAME = "Dockyard"
APP_VERSION = "0.1.0"

# Checked before the current view, so views cannot shadow navigation
GLOBAL_KEYS: dict[str, AppCommand] = {
    "q": ExitView(),
    "?": SwitchToView(ViewType.help()),
    "i": SwitchToView(ViewType.images_list()),
    "v": SwitchToView(ViewType.daemon_info()),
    "L": SwitchToView(ViewType.app_logs()),
    "r": Refresh(),
}

STATUS_BAR_STYLE = "bold white on blue"
ERROR_STYLE = "bold red"
HINT_STYLE = "dim"
HINT = "?: help | q: back/quit | r: refresh"


class App:
    """
    Dashboard state machine.

    Example:
        app = App(docker)
        app.handle_input("i")   # push the images view
        app.handle_input("q")   # back to the container list
        app.handle_input("q")   # returns False: stack empty, exit
    """

    def __init__(
        self,
        docker: DockerExecutor,
        info: DaemonInfo | None = None,
        version: VersionInfo | None = None,
        log_buffer: LogBuffer | None = None,
        log_tail: int = 100,
        initial_view: ViewType | None = None,
    ) -> None:
        """
        Initialize the controller and open the initial view.

        Args:
            docker: Shared DockerExecutor
            info: Daemon info fetched at startup, for the status bar
            version: Daemon version fetched at startup, for the status bar
            log_buffer: Buffer shown by the application logs view
            log_tail: Number of log lines the container logs view requests
            initial_view: First view, defaults to the container list
        """
        self.docker = docker
        self.info = info
        self.version = version
        self.log_buffer = log_buffer if log_buffer is not None else LogBuffer()
        self.log_tail = log_tail
        self.views: list[View] = []
        self.status_message: str | None = None
        self.size = Rect(80, 24)
        self._layout = create_layout()

        self.push_view(initial_view or ViewType.container_list())

    @property
    def current_view(self) -> View:
        return self.views[-1]

    # -------------------------------------------------------------------------
    # Input and commands
    # -------------------------------------------------------------------------

    def handle_input(self, key: str) -> bool:
        """
        Handle a key press.

        Global bindings first, then the current view. A key nobody handles
        is a NoOp.

        Returns:
            False when the last view was popped and the loop must stop
        """
        command = GLOBAL_KEYS.get(key)
        if command is None:
            command = self.current_view.handle_input(key, self.docker)
        if command is None:
            command = NoOp()
        return self.execute(command)

    def execute(self, command: AppCommand) -> bool:
        """
        Apply a command to the controller state.

        Returns:
            False when the view stack became empty, True otherwise
        """
        if isinstance(command, SwitchToView):
            self.push_view(command.view_type)
        elif isinstance(command, ExitView):
            view = self.views.pop()
            logger.debug("Closed view %s", type(view).__name__)
            if not self.views:
                return False
        elif isinstance(command, Refresh):
            if self._refresh_current_view():
                self.status_message = None
        elif isinstance(command, ErrorMsg):
            self.status_message = command.text
        return True

    def push_view(self, view_type: ViewType) -> None:
        """Build a view for view_type, push it and refresh it at once."""
        view = create_view(view_type, log_buffer=self.log_buffer, log_tail=self.log_tail)
        self.views.append(view)
        logger.debug("Opened view %s", type(view).__name__)
        self._refresh_current_view()

    # -------------------------------------------------------------------------
    # Refresh
    # -------------------------------------------------------------------------

    def _refresh_current_view(self) -> bool:
        """
        Refresh the top view, turning daemon errors into a status message.

        Returns:
            True if the refresh succeeded
        """
        view = self.current_view
        try:
            view.refresh(self.docker)
        except DockerError as e:
            logger.warning("Failed to refresh %s: %s", view.title or type(view).__name__, e)
            self.status_message = f"Failed to refresh {view.title or 'view'}: {e}"
            return False
        return True

    def refresh(self) -> None:
        """Re-fetch daemon info and refresh the top view only."""
        try:
            self.info = self.docker.info()
        except DockerError as e:
            logger.warning("Failed to fetch daemon info: %s", e)
            self.status_message = f"Failed to fetch daemon info: {e}"
        self._refresh_current_view()

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def resize(self, width: int, height: int) -> bool:
        """
        Record the terminal size.

        Returns:
            True if the size changed
        """
        size = Rect(width, height)
        if size == self.size:
            return False
        logger.debug("Terminal resized to %dx%d", width, height)
        self.size = size
        return True

    def status_bar(self) -> Text:
        text = f" {APP_NAME} v{APP_VERSION}"
        if self.info is not None:
            text += f"   {self.info.containers} containers, {self.info.images} images"
        if self.version is not None:
            text += f", docker v{self.version.version} ({self.version.api_version})"
        return Text(text, style=STATUS_BAR_STYLE, no_wrap=True, overflow="ellipsis")

    def message_line(self) -> Text:
        if self.status_message:
            return Text(self.status_message, style=ERROR_STYLE, no_wrap=True, overflow="ellipsis")
        return Text(HINT, style=HINT_STYLE, no_wrap=True)

    def draw(self, layout: Layout | None = None) -> Layout:
        """
        Draw status bar, current view and status message, top to bottom.

        Args:
            layout: Layout from create_layout(), defaults to the controller's own

        Returns:
            The updated layout
        """
        layout = layout if layout is not None else self._layout
        layout["status"].update(self.status_bar())
        self.current_view.draw(layout["body"], body_rect(*self.size))
        layout["message"].update(self.message_line())
        return layout
