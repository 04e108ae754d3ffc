"""
Pydantic response types for the Docker Engine API.

These models parse the JSON bodies returned by the daemon. Field names are
snake_case with aliases matching the API's CamelCase keys. Only the fields
the dashboard displays are declared; everything else is ignored, except for
ContainerDetails which keeps the full inspect payload for display.

API reference: https://docs.docker.com/engine/api/
"""

from pydantic import BaseModel, ConfigDict, Field


class _DockerModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Daemon
# =============================================================================


class DaemonInfo(_DockerModel):
    """
    Response from GET /info.

    Counts are daemon-wide and feed the status bar; host fields feed the
    daemon info view.
    """

    name: str = Field("", alias="Name")
    operating_system: str = Field("", alias="OperatingSystem")
    kernel_version: str = Field("", alias="KernelVersion")
    n_cpu: int = Field(0, alias="NCPU")
    mem_total: int = Field(0, alias="MemTotal")
    docker_root_dir: str = Field("", alias="DockerRootDir")
    driver: str = Field("", alias="Driver")
    server_version: str = Field("", alias="ServerVersion")
    containers: int = Field(0, alias="Containers")
    containers_running: int = Field(0, alias="ContainersRunning")
    containers_paused: int = Field(0, alias="ContainersPaused")
    containers_stopped: int = Field(0, alias="ContainersStopped")
    images: int = Field(0, alias="Images")


class VersionInfo(_DockerModel):
    """Response from GET /version."""

    version: str = Field("", alias="Version")
    api_version: str = Field("", alias="ApiVersion")
    os: str = Field("", alias="Os")
    arch: str = Field("", alias="Arch")
    go_version: str = Field("", alias="GoVersion")


# =============================================================================
# Containers
# =============================================================================


class Port(_DockerModel):
    """A port mapping entry from the container list."""

    ip: str | None = Field(None, alias="IP")
    private_port: int = Field(alias="PrivatePort")
    public_port: int | None = Field(None, alias="PublicPort")
    type: str = Field("tcp", alias="Type")

    def __str__(self) -> str:
        text = f"{self.ip}:" if self.ip else ""
        text += str(self.private_port)
        if self.public_port is not None:
            text += f" → {self.public_port}"
        return f"{text}/{self.type}"


class ContainerSummary(_DockerModel):
    """
    One entry of GET /containers/json.

    Example entry:
    {
        "Id": "8dfafdbc3a40...",
        "Names": ["/boring_feynman"],
        "Image": "ubuntu:latest",
        "Command": "echo 1",
        "Created": 1367854155,
        "State": "running",
        "Status": "Up 2 hours",
        "Ports": [{"PrivatePort": 2222, "PublicPort": 3333, "Type": "tcp"}]
    }
    """

    id: str = Field(alias="Id")
    names: list[str] = Field(default_factory=list, alias="Names")
    image: str = Field("", alias="Image")
    command: str = Field("", alias="Command")
    created: int = Field(0, alias="Created")
    state: str = Field("", alias="State")
    status: str = Field("", alias="Status")
    ports: list[Port] = Field(default_factory=list, alias="Ports")
    labels: dict[str, str] | None = Field(None, alias="Labels")
    size_rw: int | None = Field(None, alias="SizeRw")
    size_root_fs: int | None = Field(None, alias="SizeRootFs")

    @property
    def is_running(self) -> bool:
        if self.state:
            return self.state == "running"
        return self.status.startswith("Up ")


class ContainerDetails(_DockerModel):
    """
    Response from GET /containers/{id}/json.

    The inspect payload is large and varies between daemon versions, so
    undeclared keys are kept and shown verbatim in the details view.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="Id")
    name: str = Field("", alias="Name")
    created: str = Field("", alias="Created")
    image: str = Field("", alias="Image")


# =============================================================================
# Images
# =============================================================================


class ImageSummary(_DockerModel):
    """One entry of GET /images/json."""

    id: str = Field(alias="Id")
    repo_tags: list[str] | None = Field(None, alias="RepoTags")
    created: int = Field(0, alias="Created")
    size: int = Field(0, alias="Size")

    @property
    def short_id(self) -> str:
        return self.id.removeprefix("sha256:")

    @property
    def tag(self) -> str:
        if self.repo_tags:
            return self.repo_tags[0]
        return "<none>"
