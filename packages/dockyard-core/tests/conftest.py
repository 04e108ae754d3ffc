"""Shared fixtures: an in-memory stand-in for DockerExecutor."""

import io
import struct

import pytest

from dockyard_core.docker.exceptions import DockerAPIError
from dockyard_core.docker.types import (
    ContainerDetails,
    ContainerSummary,
    DaemonInfo,
    ImageSummary,
)


class FakeDocker:
    """
    Records calls and serves canned data with DockerExecutor's interface.

    Set `fail[method_name] = SomeDockerError(...)` to make a method raise.
    """

    def __init__(self) -> None:
        self.containers: list[ContainerSummary] = []
        self.images: list[ImageSummary] = []
        self.daemon_info = DaemonInfo(Name="docker-host", Containers=2, Images=3)
        self.details: dict[str, ContainerDetails] = {}
        self.log_bytes = b""
        self.calls: list[tuple] = []
        self.fail: dict[str, Exception] = {}

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.fail:
            raise self.fail[name]

    def calls_to(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]

    def info(self) -> DaemonInfo:
        self._record("info")
        return self.daemon_info

    def list_containers(self, all: bool = False) -> list[ContainerSummary]:
        self._record("list_containers", all)
        if all:
            return list(self.containers)
        return [c for c in self.containers if c.is_running]

    def inspect_container(self, container_id: str) -> ContainerDetails:
        self._record("inspect_container", container_id)
        if container_id not in self.details:
            raise DockerAPIError(404, f"No such container: {container_id}")
        return self.details[container_id]

    def list_images(self, all: bool = True) -> list[ImageSummary]:
        self._record("list_images", all)
        return list(self.images)

    def container_lifecycle_op(self, container_id, op) -> None:
        self._record("container_lifecycle_op", container_id, op)

    def fetch_log_stream(self, container_id, tail=100, stdout=True, stderr=True):
        self._record("fetch_log_stream", container_id, tail)
        return io.BytesIO(self.log_bytes)


def make_container(container_id: str, running: bool = True, **fields) -> ContainerSummary:
    data = {
        "Id": container_id,
        "Names": [f"/{container_id}-name"],
        "Image": "nginx:latest",
        "Command": "nginx -g 'daemon off;'",
        "Created": 1700000000,
        "State": "running" if running else "exited",
        "Status": "Up 2 hours" if running else "Exited (0) 3 hours ago",
        "Ports": [],
    }
    data.update(fields)
    return ContainerSummary.model_validate(data)


def frame(stream_type: int, payload: bytes) -> bytes:
    """One multiplexed log frame."""
    return struct.pack(">BxxxI", stream_type, len(payload)) + payload


@pytest.fixture
def fake_docker() -> FakeDocker:
    return FakeDocker()


@pytest.fixture
def container_factory():
    return make_container


@pytest.fixture
def log_frame():
    return frame
