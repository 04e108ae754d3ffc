"""
TUI module for the Docker dashboard.

This module provides the building blocks of the terminal UI:
- AppCommand variants and ViewType: what a key press asks for
- Input, Tick, Ticker: event channel types and the periodic producer
- KeyReader, Key, parse_keys: keyboard producer and key decoding
- LogBuffer, LogBufferHandler: in-memory capture of application logs
- create_layout, make_panel: screen layout helpers

The controller (dockyard_core.tui.controller.App) and the event loop
(dockyard_core.tui.loop) depend on the views and are imported from their
own modules.
"""

from dockyard_core.tui.buffer import (
    LogBuffer,
    LogBufferHandler,
    LogEntry,
    install_log_capture,
)
from dockyard_core.tui.commands import (
    AppCommand,
    ErrorMsg,
    ExitView,
    NoOp,
    Refresh,
    SwitchToView,
    ViewKind,
    ViewType,
)
from dockyard_core.tui.events import Input, Tick, Ticker
from dockyard_core.tui.keyboard import Key, KeyReader, parse_keys
from dockyard_core.tui.layout import Rect, create_layout, make_panel

__all__ = [
    "AppCommand",
    "ErrorMsg",
    "ExitView",
    "Input",
    "Key",
    "KeyReader",
    "LogBuffer",
    "LogBufferHandler",
    "LogEntry",
    "NoOp",
    "Rect",
    "Refresh",
    "SwitchToView",
    "Tick",
    "Ticker",
    "ViewKind",
    "ViewType",
    "create_layout",
    "install_log_capture",
    "make_panel",
    "parse_keys",
]
