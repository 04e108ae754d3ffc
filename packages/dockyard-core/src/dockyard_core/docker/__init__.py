"""
Docker daemon access for the dashboard.

- DockerAPIClient: async Engine API client over httpx
- DockerExecutor: blocking, lock-serialized façade shared by the whole app
- demux / StdOut / StdErr: multiplexed log stream decoding
"""

from dockyard_core.docker.api import DockerAPIClient, create_http_client
from dockyard_core.docker.exceptions import (
    DaemonUnreachableError,
    DockerAPIError,
    DockerError,
)
from dockyard_core.docker.executor import DockerExecutor
from dockyard_core.docker.tty import StdErr, StdOut, TtyLine, demux

__all__ = [
    "DaemonUnreachableError",
    "DockerAPIClient",
    "DockerAPIError",
    "DockerError",
    "DockerExecutor",
    "StdErr",
    "StdOut",
    "TtyLine",
    "create_http_client",
    "demux",
]
