"""Dockyard CLI - terminal dashboard for the Docker daemon.

- Options fall back to DOCKYARD_* / DOCKER_HOST environment variables
  through Settings
- Connects to the daemon BEFORE taking over the terminal, so a startup
  failure prints a plain error and exits with status 1
"""

import logging

import typer
from pydantic import ValidationError

from dockyard_core.config import Settings
from dockyard_core.docker.exceptions import DaemonUnreachableError
from dockyard_core.docker.executor import DockerExecutor
from dockyard_core.tui.buffer import LogBuffer, install_log_capture
from dockyard_core.tui.loop import run_dashboard

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dockyard",
    help="Terminal dashboard for the Docker daemon",
    add_completion=False,
)


@app.command()
def run(
    host: str = typer.Option(
        None,
        "--host",
        "-H",
        help="Docker daemon address (e.g., unix:///var/run/docker.sock, tcp://host:2375)",
    ),
    interval: float = typer.Option(
        None, "--interval", "-i", help="Refresh interval in seconds"
    ),
    log_level: str = typer.Option(
        None, "--log-level", help="Application log level (DEBUG, INFO, WARNING, ...)"
    ),
) -> None:
    """
    Run the dashboard.

    Environment variables:
        DOCKER_HOST: Docker daemon address
        DOCKYARD_TICK_INTERVAL: Refresh interval in seconds
        DOCKYARD_LOG_TAIL: Lines shown in the container logs view
        DOCKYARD_LOG_LEVEL: Application log level
    """
    overrides = {}
    if host:
        overrides["docker_host"] = host
    if interval is not None:
        overrides["tick_interval"] = interval
    if log_level:
        overrides["log_level"] = log_level
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            typer.echo(f"Error: invalid {field}: {error['msg']}", err=True)
        raise typer.Exit(1)

    log_buffer = LogBuffer(maxlen=settings.log_buffer_size)
    install_log_capture(log_buffer, level=settings.log_level)
    logger.info("Logging system initialised")

    try:
        docker = DockerExecutor.from_host(
            settings.docker_host,
            api_version=settings.api_version,
            timeout=settings.http_timeout,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        run_dashboard(docker, settings, log_buffer)
    except DaemonUnreachableError as e:
        typer.echo(f"Failed to connect to the Docker daemon: {e.reason}", err=True)
        raise typer.Exit(1)
    finally:
        docker.close()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
