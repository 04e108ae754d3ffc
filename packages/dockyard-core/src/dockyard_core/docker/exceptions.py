"""
Exception classes for Docker daemon communication.

- DockerError: Base class, any failed daemon call
- DockerAPIError: The daemon answered with a non-success HTTP status
- DaemonUnreachableError: The daemon could not be reached at startup

Views turn DockerError into a user-visible status message. Only
DaemonUnreachableError is fatal, and only before the dashboard starts.
"""


class DockerError(Exception):
    """Raised when a call to the Docker daemon fails."""


class DockerAPIError(DockerError):
    """
    Raised when the daemon returns an error response.

    Attributes:
        status_code: HTTP status returned by the daemon
        message: Error message from the daemon's JSON body, or the reason phrase
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{message} (HTTP {status_code})")


class DaemonUnreachableError(DockerError):
    """
    Raised when the initial connection to the daemon fails.

    Attributes:
        host: The Docker host that was tried
        reason: Description of the underlying failure
    """

    def __init__(self, host: str, reason: str) -> None:
        self.host = host
        self.reason = reason
        super().__init__(f"cannot reach {host}: {reason}")
