"""Chain command - dependency tree from roots down to an entity."""

import json as json_lib
import sys
import click
from ...presentation.text_formatter import format_chain
from ...utils.errors import ModGraphError
from ...utils.logging import get_logger
from ..utils import format_error, load_settings, not_found_message, open_explorer

logger = get_logger("cli.chain")


@click.command()
@click.argument('name')
@click.argument('document', required=False, type=click.Path(exists=False))
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.pass_context
def chain(ctx, name, document, as_json, no_color):
    """Print the dependency chain leading to entity NAME."""
    try:
        config = load_settings(ctx.obj)
        explorer = open_explorer(document, config)
        
        if explorer.get_entity(name) is None:
            click.echo(format_error(not_found_message(explorer, name)), err=True)
            sys.exit(1)
        
        nodes = explorer.build_chain(name)
        if as_json:
            click.echo(json_lib.dumps([node.model_dump() for node in nodes], indent=2))
        else:
            display = dict(config.get("display", {}))
            if no_color:
                display["color"] = False
            click.echo(format_chain(nodes, display))
        
    except ModGraphError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Chain failed: {e}"), err=True)
        sys.exit(1)
