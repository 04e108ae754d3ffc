"""
Views of the dashboard, one per screen.

- View: common contract (handle_input, refresh, draw)
- create_view: build the view for a ViewType
"""

from dockyard_core.tui.buffer import LogBuffer
from dockyard_core.tui.commands import ViewKind, ViewType
from dockyard_core.views.app_logs import AppLogsView
from dockyard_core.views.base import ScrollableView, SelectableListView, View
from dockyard_core.views.container_details import ContainerDetailsView
from dockyard_core.views.container_list import ContainerListView
from dockyard_core.views.container_logs import ContainerLogsView
from dockyard_core.views.daemon_info import DaemonInfoView
from dockyard_core.views.help import HelpView
from dockyard_core.views.images_list import ImagesListView


def create_view(view_type: ViewType, log_buffer: LogBuffer, log_tail: int = 100) -> View:
    """
    Build a fresh view for view_type.

    Args:
        view_type: Which view to build
        log_buffer: Capture buffer shown by the application logs view
        log_tail: Number of lines the container logs view requests

    Returns:
        A new view with empty caches, not yet refreshed
    """
    kind = view_type.kind
    if kind is ViewKind.HELP:
        return HelpView()
    if kind is ViewKind.CONTAINER_LIST:
        return ContainerListView()
    if kind is ViewKind.CONTAINER_DETAILS:
        return ContainerDetailsView(view_type.container_id)
    if kind is ViewKind.CONTAINER_LOGS:
        return ContainerLogsView(view_type.container_id, tail=log_tail)
    if kind is ViewKind.IMAGES_LIST:
        return ImagesListView()
    if kind is ViewKind.DAEMON_INFO:
        return DaemonInfoView()
    if kind is ViewKind.APP_LOGS:
        return AppLogsView(log_buffer)
    raise ValueError(f"Unknown view kind: {kind}")


__all__ = [
    "AppLogsView",
    "ContainerDetailsView",
    "ContainerListView",
    "ContainerLogsView",
    "DaemonInfoView",
    "HelpView",
    "ImagesListView",
    "ScrollableView",
    "SelectableListView",
    "View",
    "create_view",
]
