"""Environment-based configuration for the dashboard."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Dashboard configuration.

    All settings can be overridden via environment variables with
    DOCKYARD_ prefix. For example:
        DOCKYARD_TICK_INTERVAL=5
        DOCKYARD_LOG_LEVEL=DEBUG

    The daemon address also honours the standard DOCKER_HOST variable.
    """

    # Daemon connection
    docker_host: str = Field(
        "unix:///var/run/docker.sock",
        validation_alias=AliasChoices("DOCKYARD_DOCKER_HOST", "DOCKER_HOST"),
    )
    api_version: str | None = None
    http_timeout: float | None = None  # seconds, None waits forever

    # Event loop
    tick_interval: float = 2.0  # seconds between passive refreshes

    # Container logs view
    log_tail: int = 100

    # Application log capture
    log_level: str = "INFO"
    log_buffer_size: int = 1000

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return level

    model_config = {"env_prefix": "DOCKYARD_", "populate_by_name": True}
