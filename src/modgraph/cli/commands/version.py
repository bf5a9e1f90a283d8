"""Version command - show modgraph version."""

import click
from ... import __version__


@click.command()
def version():
    """Show modgraph version."""
    click.echo(f"modgraph version {__version__}")
