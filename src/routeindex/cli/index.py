"""routeindex index command - build and persist index records."""

import asyncio
import json
from pathlib import Path

import click

from routeindex.cli.utils import (
    command_error,
    get_config,
    load_content_item,
    write_content_item,
)
from routeindex.core.errors import RouteIndexError
from routeindex.index.ops import RouteIndexCoordinator


@click.command()
@click.argument(
    "item_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--db", "db_path", type=click.Path(dir_okay=False, path_type=Path), help="Index database"
)
@click.option(
    "--write-back",
    is_flag=True,
    help="Save items whose AutoroutePart changed (cleared removal markers)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def index_command(
    ctx: click.Context,
    item_files: tuple[Path, ...],
    db_path: Path | None,
    write_back: bool,
    as_json: bool,
) -> None:
    """Index content items into the route index store.

    ITEM_FILES are content item JSON documents, one version per file.
    """
    config = get_config(ctx)
    items = [load_content_item(path) for path in item_files]
    try:
        parts_before = [item.autoroute_part() for item in items]
    except RouteIndexError as e:
        raise command_error(e) from e

    coordinator = RouteIndexCoordinator.from_config(config, db_path=db_path)
    try:
        stats = asyncio.run(coordinator.index_many(items))
    except RouteIndexError as e:
        raise command_error(e) from e
    finally:
        coordinator.store.db.dispose()

    updated = 0
    if write_back:
        for path, item, before in zip(item_files, items, parts_before, strict=True):
            if item.autoroute_part() != before:
                write_content_item(path, item)
                updated += 1

    if as_json:
        click.echo(
            json.dumps(
                {
                    "items_processed": stats.items_processed,
                    "items_indexed": stats.items_indexed,
                    "items_skipped": stats.items_skipped,
                    "records_written": stats.records_written,
                    "items_updated": updated,
                }
            )
        )
        return

    click.echo(
        f"Indexed {stats.items_indexed}/{stats.items_processed} items "
        f"({stats.records_written} records, {stats.items_skipped} skipped)"
    )
    if updated:
        click.echo(f"Updated {updated} item file(s)")
