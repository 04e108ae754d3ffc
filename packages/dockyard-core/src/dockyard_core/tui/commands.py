"""
Commands returned by input handling, and the view identifiers they carry.

Key handlers never change screens or touch the daemon for navigation
themselves: they return an AppCommand describing the effect, and the
App controller carries it out. This keeps input detection separate from
its consequences.

AppCommand variants:
- SwitchToView(view_type): build a view and push it on the stack
- ExitView: pop the current view
- Refresh: re-run the current view's refresh
- ErrorMsg(text): show a status message
- NoOp: the key was consumed, nothing else happens
"""

from dataclasses import dataclass
from enum import Enum

from dockyard_core.types import ContainerId


class ViewKind(Enum):
    """The closed set of screens the dashboard can show."""

    HELP = "help"
    CONTAINER_LIST = "container_list"
    CONTAINER_DETAILS = "container_details"
    CONTAINER_LOGS = "container_logs"
    IMAGES_LIST = "images_list"
    DAEMON_INFO = "daemon_info"
    APP_LOGS = "app_logs"


_NEEDS_CONTAINER = {ViewKind.CONTAINER_DETAILS, ViewKind.CONTAINER_LOGS}


@dataclass(frozen=True)
class ViewType:
    """
    Identifies which view to instantiate.

    Attributes:
        kind: Which screen
        container_id: Target container, required for details and logs
    """

    kind: ViewKind
    container_id: ContainerId | None = None

    def __post_init__(self) -> None:
        if (self.kind in _NEEDS_CONTAINER) != (self.container_id is not None):
            raise ValueError(f"{self.kind.value} view: invalid container_id {self.container_id!r}")

    @classmethod
    def help(cls) -> "ViewType":
        return cls(ViewKind.HELP)

    @classmethod
    def container_list(cls) -> "ViewType":
        return cls(ViewKind.CONTAINER_LIST)

    @classmethod
    def container_details(cls, container_id: ContainerId) -> "ViewType":
        return cls(ViewKind.CONTAINER_DETAILS, container_id)

    @classmethod
    def container_logs(cls, container_id: ContainerId) -> "ViewType":
        return cls(ViewKind.CONTAINER_LOGS, container_id)

    @classmethod
    def images_list(cls) -> "ViewType":
        return cls(ViewKind.IMAGES_LIST)

    @classmethod
    def daemon_info(cls) -> "ViewType":
        return cls(ViewKind.DAEMON_INFO)

    @classmethod
    def app_logs(cls) -> "ViewType":
        return cls(ViewKind.APP_LOGS)


@dataclass(frozen=True)
class SwitchToView:
    view_type: ViewType


@dataclass(frozen=True)
class ExitView:
    pass


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class ErrorMsg:
    text: str


@dataclass(frozen=True)
class NoOp:
    pass


AppCommand = SwitchToView | ExitView | Refresh | ErrorMsg | NoOp
