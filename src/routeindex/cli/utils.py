"""CLI utilities."""

import json
from pathlib import Path
from typing import Any

import click
import structlog
from rich.table import Table

from routeindex.config.models import RouteIndexConfig
from routeindex.core.errors import RouteIndexError
from routeindex.core.logging import get_log_file_path
from routeindex.index.models import AutoroutePartIndex, ContentItem

logger = structlog.get_logger()


def get_config(ctx: click.Context) -> RouteIndexConfig:
    config = ctx.obj.get("config") if ctx.obj else None
    return config if config is not None else RouteIndexConfig()


def load_content_item(path: Path) -> ContentItem:
    """Read a content item JSON file.

    Raises:
        click.ClickException: If the file is not valid JSON or not a content item
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path}: invalid JSON ({e})") from e
    try:
        return ContentItem.from_dict(data)
    except RouteIndexError as e:
        raise click.ClickException(f"{path}: {e}") from e


def command_error(error: RouteIndexError) -> click.ClickException:
    """Log ``error`` and turn it into a click error pointing at the log file, if any."""
    logger.error("command_failed", **error.to_dict())
    log_file = get_log_file_path()
    if log_file:
        return click.ClickException(f"{error}. See {log_file} for details.")
    return click.ClickException(str(error))


def write_content_item(path: Path, item: ContentItem) -> None:
    path.write_text(json.dumps(item.to_dict(), indent=2) + "\n", encoding="utf-8")


def record_to_dict(record: AutoroutePartIndex) -> dict[str, Any]:
    return record.model_dump(exclude={"id"})


def records_table(title: str, records: list[AutoroutePartIndex]) -> Table:
    table = Table(title=title)
    table.add_column("Path", style="cyan")
    table.add_column("Contained item")
    table.add_column("JSON path")
    table.add_column("Published")
    table.add_column("Latest")
    for record in records:
        table.add_row(
            record.path or "-",
            record.contained_content_item_id or "-",
            record.json_path or "-",
            "yes" if record.published else "no",
            "yes" if record.latest else "no",
        )
    return table
