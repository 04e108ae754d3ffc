"""
Docker Engine API client.

This module provides the DockerAPIClient class for querying and controlling
the Docker daemon over its HTTP API, usually served on a Unix socket.

DockerAPIClient receives an injected httpx.AsyncClient with base_url set to
the daemon (see create_http_client). All methods are async and fail loudly:
error responses raise DockerAPIError carrying the daemon's own message.

Docker API Documentation:
- https://docs.docker.com/engine/api/latest/
"""

import logging
from dataclasses import dataclass

import httpx

from dockyard_core.docker.exceptions import DockerAPIError
from dockyard_core.docker.types import (
    ContainerDetails,
    ContainerSummary,
    DaemonInfo,
    ImageSummary,
    VersionInfo,
)
from dockyard_core.types import ContainerId, LifecycleOp

logger = logging.getLogger(__name__)

# Host name used in request URLs when talking over a Unix socket
SOCKET_BASE_URL = "http://docker"


def create_http_client(
    docker_host: str,
    api_version: str | None = None,
    timeout: float | None = None,
) -> httpx.AsyncClient:
    """
    Create an httpx.AsyncClient pointed at the Docker daemon.

    Args:
        docker_host: DOCKER_HOST style address, "unix:///path" or "tcp://host:port"
        api_version: Optional API version to pin, e.g. "1.43"
        timeout: Request timeout in seconds, None to wait forever

    Returns:
        AsyncClient with base_url and transport configured

    Raises:
        ValueError: If the host scheme is not supported
    """
    prefix = f"/v{api_version}" if api_version else ""

    if docker_host.startswith("unix://"):
        transport = httpx.AsyncHTTPTransport(uds=docker_host.removeprefix("unix://"))
        return httpx.AsyncClient(
            base_url=SOCKET_BASE_URL + prefix,
            transport=transport,
            timeout=timeout,
        )
    if docker_host.startswith(("tcp://", "http://")):
        address = docker_host.split("://", 1)[1]
        return httpx.AsyncClient(base_url=f"http://{address}{prefix}", timeout=timeout)

    raise ValueError(f"Unsupported Docker host: {docker_host}")


def _raise_for_status(response: httpx.Response) -> None:
    """
    Raise DockerAPIError unless the response is a success.

    304 Not Modified is a success: the daemon uses it for starting a running
    container, stopping a stopped one, and similar no-op transitions.
    """
    if response.is_success or response.status_code == 304:
        return

    message = response.reason_phrase or "request failed"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        message = body["message"]
    raise DockerAPIError(response.status_code, message)


@dataclass
class DockerAPIClient:
    """
    Docker Engine API client with injected httpx client.

    Attributes:
        http: Pre-configured httpx.AsyncClient with base_url set to the daemon.

    Example:
        async with create_http_client("unix:///var/run/docker.sock") as http:
            client = DockerAPIClient(http=http)
            for container in await client.list_containers(all=True):
                print(container.id, container.status)
    """

    http: httpx.AsyncClient

    async def info(self) -> DaemonInfo:
        """
        Get daemon-wide information.

        Raises:
            DockerAPIError: On error responses.
            pydantic.ValidationError: On malformed response data.
        """
        response = await self.http.get("/info")
        _raise_for_status(response)
        return DaemonInfo.model_validate(response.json())

    async def version(self) -> VersionInfo:
        """Get daemon and API version information."""
        response = await self.http.get("/version")
        _raise_for_status(response)
        return VersionInfo.model_validate(response.json())

    async def list_containers(self, all: bool = False) -> list[ContainerSummary]:
        """
        List containers.

        Args:
            all: Include stopped containers (the daemon default is running only)

        Returns:
            Containers in the order the daemon returns them (newest first).
        """
        response = await self.http.get(
            "/containers/json", params={"all": "1" if all else "0"}
        )
        _raise_for_status(response)
        return [ContainerSummary.model_validate(item) for item in response.json()]

    async def inspect_container(self, container_id: ContainerId) -> ContainerDetails:
        """Get low-level information about one container."""
        response = await self.http.get(f"/containers/{container_id}/json")
        _raise_for_status(response)
        return ContainerDetails.model_validate(response.json())

    async def list_images(self, all: bool = False) -> list[ImageSummary]:
        """
        List images.

        Args:
            all: Include intermediate images
        """
        response = await self.http.get("/images/json", params={"all": "1" if all else "0"})
        _raise_for_status(response)
        return [ImageSummary.model_validate(item) for item in response.json()]

    # -------------------------------------------------------------------------
    # Lifecycle Methods - POST/DELETE operations that change container state
    # -------------------------------------------------------------------------

    async def container_lifecycle_op(
        self, container_id: ContainerId, op: LifecycleOp
    ) -> None:
        """
        Pause, unpause, start, stop or delete a container.

        Args:
            container_id: Container to act on
            op: The operation to perform

        Raises:
            DockerAPIError: On error responses (e.g. 404 no such container,
                409 conflict such as deleting a running container).
        """
        if op is LifecycleOp.DELETE:
            response = await self.http.delete(f"/containers/{container_id}")
        else:
            response = await self.http.post(f"/containers/{container_id}/{op.value}")
        _raise_for_status(response)
        logger.info("Container %s %s", container_id[:12], op.past_tense)

    async def container_logs(
        self,
        container_id: ContainerId,
        tail: int = 100,
        stdout: bool = True,
        stderr: bool = True,
    ) -> bytes:
        """
        Fetch the multiplexed log stream of a container.

        Never follows: the request returns once the daemon has sent the
        last `tail` lines. The body is the raw frame stream; decode it with
        dockyard_core.docker.tty.demux().

        Args:
            container_id: Container whose logs to fetch
            tail: Number of lines from the end of the log
            stdout: Include standard output
            stderr: Include standard error

        Returns:
            Raw response body
        """
        response = await self.http.get(
            f"/containers/{container_id}/logs",
            params={
                "follow": "0",
                "stdout": "1" if stdout else "0",
                "stderr": "1" if stderr else "0",
                "tail": str(tail),
            },
        )
        _raise_for_status(response)
        return response.content

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http.aclose()
