"""
Dockyard Core Library

Interactive terminal dashboard for inspecting and controlling a Docker daemon.
This package provides:

- Docker access: async Engine API client, serialized blocking façade,
  multiplexed log stream decoding
- TUI: view-stack controller, event loop with keyboard and tick producers
- Views: containers, container details and logs, images, daemon info,
  help, application logs
- CLI infrastructure: Typer-based entry point
"""

__version__ = "0.1.0"

# Re-export public types for convenient imports
from dockyard_core.config import Settings
from dockyard_core.types import ContainerId, LifecycleOp

__all__ = [
    "__version__",
    "ContainerId",
    "LifecycleOp",
    "Settings",
]
