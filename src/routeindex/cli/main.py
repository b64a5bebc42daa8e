"""RouteIndex CLI - routeindex command."""

from pathlib import Path

import click

from routeindex.cli.build import build_command
from routeindex.cli.index import index_command
from routeindex.cli.lookup import lookup_command
from routeindex.config.loader import load_config
from routeindex.core.errors import ConfigError
from routeindex.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="routeindex")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """RouteIndex - route path index for hierarchical content items."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        config.logging.level = "DEBUG"

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    configure_logging(config=config.logging)


cli.add_command(build_command, name="build")
cli.add_command(index_command, name="index")
cli.add_command(lookup_command, name="lookup")


if __name__ == "__main__":
    cli()
