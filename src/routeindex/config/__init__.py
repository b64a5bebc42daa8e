"""Config module exports."""

from routeindex.config.loader import load_config
from routeindex.config.models import (
    DatabaseConfig,
    IndexConfig,
    LoggingConfig,
    RouteIndexConfig,
)

__all__ = [
    "load_config",
    "RouteIndexConfig",
    "IndexConfig",
    "LoggingConfig",
    "DatabaseConfig",
]
