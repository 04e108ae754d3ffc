"""
Blocking façade over the async Docker API client.

The dashboard's UI code is synchronous, while DockerAPIClient is async. The
DockerExecutor owns one private asyncio event loop and runs every daemon call
to completion on it, holding a lock for the whole call. It is the single
point through which the process talks to the daemon:

- Callers on any thread get plain blocking methods
- No two daemon requests ever run at the same time
- Transport failures and malformed payloads surface as DockerError

There is no timeout or cancellation beyond what the HTTP client is
configured with: a hung daemon call blocks its caller until it returns.
"""

import asyncio
import io
import logging
import threading
from collections.abc import Awaitable, Callable
from typing import BinaryIO, TypeVar

import httpx
from pydantic import ValidationError

from dockyard_core.docker.api import DockerAPIClient, create_http_client
from dockyard_core.docker.exceptions import DaemonUnreachableError, DockerError
from dockyard_core.docker.types import (
    ContainerDetails,
    ContainerSummary,
    DaemonInfo,
    ImageSummary,
    VersionInfo,
)
from dockyard_core.types import ContainerId, LifecycleOp

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DockerExecutor:
    """
    Thread-safe, serialized, blocking access to the Docker daemon.

    Create one per process and share it. Every public method acquires the
    executor's lock for its own duration and releases it before returning;
    callers never hold the lock themselves.

    Example:
        docker = DockerExecutor.from_host("unix:///var/run/docker.sock")
        try:
            for container in docker.list_containers(all=True):
                print(container.id)
        finally:
            docker.close()
    """

    def __init__(self, client: DockerAPIClient, host: str = "") -> None:
        """
        Initialize executor.

        Args:
            client: Async API client; it is only ever awaited on this
                executor's own event loop
            host: Docker host description, used in error messages
        """
        self._client = client
        self.host = host
        self._loop = asyncio.new_event_loop()
        self._lock = threading.Lock()

    @classmethod
    def from_host(
        cls,
        docker_host: str,
        api_version: str | None = None,
        timeout: float | None = None,
    ) -> "DockerExecutor":
        """Build an executor with an httpx client for docker_host."""
        http = create_http_client(docker_host, api_version=api_version, timeout=timeout)
        return cls(DockerAPIClient(http=http), host=docker_host)

    def _execute(self, call: Callable[..., Awaitable[T]], *args, **kwargs) -> T:
        """
        Run one client coroutine to completion under the lock.

        Raises:
            DockerError: On any daemon, transport or decoding failure
        """
        with self._lock:
            try:
                return self._loop.run_until_complete(call(*args, **kwargs))
            except DockerError:
                raise
            except httpx.HTTPError as e:
                raise DockerError(f"{type(e).__name__}: {e}") from e
            except ValidationError as e:
                raise DockerError(f"Unexpected response from daemon: {e}") from e
            except ValueError as e:
                # Body that is not JSON at all (json.JSONDecodeError)
                raise DockerError(f"Unexpected response from daemon: {e}") from e

    def connect(self) -> tuple[DaemonInfo, VersionInfo]:
        """
        Verify the daemon is reachable.

        Returns:
            Daemon info and version, fetched once for the status bar

        Raises:
            DaemonUnreachableError: If either call fails
        """
        try:
            info = self.info()
            version = self.version()
        except DockerError as e:
            raise DaemonUnreachableError(self.host or "docker daemon", str(e)) from e
        logger.info(
            "Connected to Docker %s (API %s) on %s",
            version.version,
            version.api_version,
            self.host or "docker daemon",
        )
        return info, version

    def info(self) -> DaemonInfo:
        return self._execute(self._client.info)

    def version(self) -> VersionInfo:
        return self._execute(self._client.version)

    def list_containers(self, all: bool = False) -> list[ContainerSummary]:
        return self._execute(self._client.list_containers, all=all)

    def inspect_container(self, container_id: ContainerId) -> ContainerDetails:
        return self._execute(self._client.inspect_container, container_id)

    def list_images(self, all: bool = True) -> list[ImageSummary]:
        return self._execute(self._client.list_images, all=all)

    def container_lifecycle_op(self, container_id: ContainerId, op: LifecycleOp) -> None:
        self._execute(self._client.container_lifecycle_op, container_id, op)

    def pause_container(self, container_id: ContainerId) -> None:
        self.container_lifecycle_op(container_id, LifecycleOp.PAUSE)

    def unpause_container(self, container_id: ContainerId) -> None:
        self.container_lifecycle_op(container_id, LifecycleOp.UNPAUSE)

    def start_container(self, container_id: ContainerId) -> None:
        self.container_lifecycle_op(container_id, LifecycleOp.START)

    def stop_container(self, container_id: ContainerId) -> None:
        self.container_lifecycle_op(container_id, LifecycleOp.STOP)

    def delete_container(self, container_id: ContainerId) -> None:
        self.container_lifecycle_op(container_id, LifecycleOp.DELETE)

    def fetch_log_stream(
        self,
        container_id: ContainerId,
        tail: int = 100,
        stdout: bool = True,
        stderr: bool = True,
    ) -> BinaryIO:
        """
        Fetch a container's multiplexed log stream (never follows).

        Returns:
            Readable binary stream positioned at the first frame
        """
        data = self._execute(
            self._client.container_logs,
            container_id,
            tail=tail,
            stdout=stdout,
            stderr=stderr,
        )
        return io.BytesIO(data)

    def close(self) -> None:
        """Close the HTTP client and the private event loop."""
        with self._lock:
            if self._loop.is_closed():
                return
            try:
                self._loop.run_until_complete(self._client.aclose())
            finally:
                self._loop.close()
