"""routeindex build command - print the index records of one content item."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console

from routeindex.cli.utils import (
    command_error,
    get_config,
    load_content_item,
    record_to_dict,
    records_table,
)
from routeindex.core.errors import RouteIndexError
from routeindex.index.aspects import JsonAspectResolver
from routeindex.index.builder import RouteIndexBuilder


@click.command()
@click.argument("item_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def build_command(ctx: click.Context, item_file: Path, as_json: bool) -> None:
    """Show the route index records for a content item.

    ITEM_FILE is a content item JSON document. Nothing is persisted.
    """
    config = get_config(ctx)
    item = load_content_item(item_file)
    builder = RouteIndexBuilder(JsonAspectResolver(config.index.container_paths))

    try:
        records = asyncio.run(builder.build(item))
    except RouteIndexError as e:
        raise command_error(e) from e

    if as_json:
        payload = None if records is None else [record_to_dict(r) for r in records]
        click.echo(json.dumps(payload, indent=2))
        return

    if records is None:
        click.echo(f"{item.content_item_id}: not routable")
        return

    Console().print(records_table(item.content_item_id, records))
