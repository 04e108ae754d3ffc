"""
Event loop driving the dashboard.

Threading model:
- KeyReader thread: sends Input(key) for every key press
- Ticker thread: sends Tick every tick_interval seconds
- Consumer (the calling thread): detect resize, redraw, take ONE event from
  the channel, process it fully, repeat

Events are processed one at a time in arrival order. All controller and view
state is only touched by the consumer, so it needs no locking. Daemon calls
made while processing an event block the consumer: the screen does not
redraw until they return.

Startup/teardown order in run_dashboard():
1. Build the controller (first refresh) BEFORE touching the terminal
2. Enter the Live context (alternate screen)
3. Start producers, run the consumer loop
4. Stop producers (KeyReader restores the terminal mode), leave Live
"""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.live import Live

from dockyard_core.config import Settings
from dockyard_core.docker.executor import DockerExecutor
from dockyard_core.tui.buffer import LogBuffer
from dockyard_core.tui.controller import App
from dockyard_core.tui.events import AppEvent, EventChannel, Input, Tick, Ticker
from dockyard_core.tui.keyboard import KeyReader

logger = logging.getLogger(__name__)


class EventLoop:
    """
    Single consumer of the event channel.

    Example:
        loop = EventLoop(app, events, redraw=lambda: live.update(app.draw(), refresh=True))
        loop.run()  # returns once the last view is closed
    """

    def __init__(
        self,
        app: App,
        events: EventChannel,
        redraw: Callable[[], None],
        get_size: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        """
        Initialize event loop.

        Args:
            app: Controller to drive
            events: Channel fed by the producer threads
            redraw: Paints the controller's current state
            get_size: Returns the terminal (width, height), for resize detection
        """
        self.app = app
        self.events = events
        self._redraw = redraw
        self._get_size = get_size

    def dispatch(self, event: AppEvent) -> bool:
        """
        Process one event.

        Returns:
            False when the loop must stop
        """
        if isinstance(event, Tick):
            self.app.refresh()
            return True
        if isinstance(event, Input):
            return self.app.handle_input(event.key)
        logger.warning("Ignoring unknown event %r", event)
        return True

    def run(self) -> None:
        """Run until the controller signals exit or the user hits Ctrl+C."""
        logger.info("Starting main event loop")
        try:
            while True:
                if self._get_size is not None:
                    self.app.resize(*self._get_size())
                self._redraw()

                event = self.events.get()
                if not self.dispatch(event):
                    break
        except KeyboardInterrupt:
            logger.info("Interrupted")
        logger.info("Event loop stopped")


def run_dashboard(
    docker: DockerExecutor,
    settings: Settings,
    log_buffer: LogBuffer,
    console: Console | None = None,
) -> None:
    """
    Run the dashboard until the user quits.

    Args:
        docker: Connected executor (see DockerExecutor.connect)
        settings: Dashboard settings
        log_buffer: Buffer receiving the application's log records
        console: Rich Console to use (creates default if None)
    """
    console = console if console is not None else Console()

    info, version = docker.connect()
    app = App(
        docker,
        info=info,
        version=version,
        log_buffer=log_buffer,
        log_tail=settings.log_tail,
    )

    events: EventChannel = EventChannel()
    keyboard = KeyReader(on_key=lambda key: events.put(Input(key)))
    ticker = Ticker(events, interval=settings.tick_interval)

    def get_size() -> tuple[int, int]:
        return console.size.width, console.size.height

    app.resize(*get_size())

    with Live(
        app.draw(),
        console=console,
        screen=True,
        auto_refresh=False,
        transient=True,
    ) as live:

        def redraw() -> None:
            live.update(app.draw(), refresh=True)

        keyboard.start()
        ticker.start()
        try:
            EventLoop(app, events, redraw=redraw, get_size=get_size).run()
        finally:
            ticker.stop()
            keyboard.stop()
