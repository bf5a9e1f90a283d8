"""Main CLI entry point for modgraph."""

import logging
import click
from .commands.chain import chain
from .commands.list import list_entities
from .commands.show import show
from .commands.stats import stats
from .commands.version import version
from ..utils.logging import setup_logging
from .. import __version__


@click.group()
@click.version_option(version=__version__, prog_name="modgraph", message="%(prog)s version %(version)s")
@click.option('--config', 'config_path', type=click.Path(), help='Extra YAML config file')
@click.option('--verbose', '-v', is_flag=True, help='Show progress logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """modgraph - explore JSON-LD entity dependency graphs."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        setup_logging(logging.INFO)


cli.add_command(list_entities)
cli.add_command(show)
cli.add_command(chain)
cli.add_command(stats)
cli.add_command(version)
