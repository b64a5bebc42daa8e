"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (ROUTEINDEX__SECTION__KEY)
3. YAML config file passed to load_config()
4. Global YAML (~/.config/routeindex/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    ROUTEINDEX__<SECTION>__<KEY>=<VALUE>

Examples:
    ROUTEINDEX__LOGGING__LEVEL=DEBUG
    ROUTEINDEX__INDEX__DB_PATH=/var/lib/routeindex/index.db
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_CONTAINER_PATHS = ["BagPart.ContentItems", "FlowPart.Widgets"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        ROUTEINDEX__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every skipped and built item.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class IndexConfig(BaseModel):
    """Index configuration.

    Env vars:
        ROUTEINDEX__INDEX__DB_PATH: Location of the SQLite index store
    """

    container_paths: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONTAINER_PATHS),
        description="Dotted payload paths holding contained items, in walk order.",
    )
    db_path: str = Field(
        default="routeindex.db",
        description="SQLite file backing the route index store.",
    )

    @field_validator("container_paths")
    @classmethod
    def validate_container_paths(cls, v: list[str]) -> list[str]:
        for path in v:
            if not path or any(not segment for segment in path.split(".")):
                raise ValueError(f"Container path has an empty segment: {path!r}")
        return v


class DatabaseConfig(BaseModel):
    """Database connection configuration.

    Env vars:
        ROUTEINDEX__DATABASE__BUSY_TIMEOUT_MS: SQLite busy timeout
    """

    busy_timeout_ms: int = Field(
        default=30000,
        description="SQLite busy timeout (ms). How long to wait for locks.",
    )

    @field_validator("busy_timeout_ms")
    @classmethod
    def validate_busy_timeout(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Busy timeout must be non-negative, got {v}")
        return v


class RouteIndexConfig(BaseModel):
    """Root configuration for RouteIndex."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    index: IndexConfig = Field(default_factory=IndexConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
