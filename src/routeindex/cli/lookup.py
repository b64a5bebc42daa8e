"""routeindex lookup command - find content routed at a path."""

import json
from pathlib import Path

import click
from rich.console import Console

from routeindex.cli.utils import get_config, record_to_dict, records_table
from routeindex.index.db import Database, RouteIndexStore


@click.command()
@click.argument("path")
@click.option(
    "--db", "db_path", type=click.Path(dir_okay=False, path_type=Path), help="Index database"
)
@click.option("--latest", is_flag=True, help="Match latest versions instead of published ones")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def lookup_command(
    ctx: click.Context, path: str, db_path: Path | None, latest: bool, as_json: bool
) -> None:
    """Show the index records routed at PATH."""
    config = get_config(ctx)
    resolved = db_path or Path(config.index.db_path)
    if not resolved.exists():
        raise click.ClickException(f"Index database not found: {resolved}")

    db = Database(resolved, busy_timeout_ms=config.database.busy_timeout_ms)
    try:
        records = RouteIndexStore(db).find_by_path(path, latest=latest)
    finally:
        db.dispose()

    if as_json:
        click.echo(json.dumps([record_to_dict(r) for r in records], indent=2))
        return

    if not records:
        click.echo(f"No content routed at {path}")
        return

    Console().print(records_table(path, records))
