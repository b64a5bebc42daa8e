"""Core module exports."""

from routeindex.core.errors import (
    ConfigError,
    ContentError,
    ErrorCode,
    InternalError,
    RouteIndexError,
)
from routeindex.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "RouteIndexError",
    "ConfigError",
    "ContentError",
    "ErrorCode",
    "InternalError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
