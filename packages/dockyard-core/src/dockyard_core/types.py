"""
Shared data types for the dashboard.

These are internal types shared by the Docker client layer and the views.
Pydantic models are reserved for API responses (see dockyard_core.docker.types).
"""

from enum import Enum

# Type aliases for common patterns
ContainerId = str
"""Docker's own container identifier (full or short hex ID, or name)."""


class LifecycleOp(Enum):
    """Container lifecycle operations the dashboard can request."""

    PAUSE = "pause"
    UNPAUSE = "unpause"
    START = "start"
    STOP = "stop"
    DELETE = "delete"

    @property
    def past_tense(self) -> str:
        """Verb used in log lines, e.g. "stopped"."""
        return {
            LifecycleOp.PAUSE: "paused",
            LifecycleOp.UNPAUSE: "unpaused",
            LifecycleOp.START: "started",
            LifecycleOp.STOP: "stopped",
            LifecycleOp.DELETE: "deleted",
        }[self]
