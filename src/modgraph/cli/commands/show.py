"""Show command - detail view of one entity."""

import json as json_lib
import sys
import click
from ...presentation.text_formatter import format_entity_detail
from ...utils.errors import ModGraphError
from ...utils.logging import get_logger
from ..utils import format_error, load_settings, not_found_message, open_explorer

logger = get_logger("cli.show")


@click.command()
@click.argument('name')
@click.argument('document', required=False, type=click.Path(exists=False))
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.pass_context
def show(ctx, name, document, as_json, no_color):
    """
    Show entity NAME: properties, dependencies, stats and dependency chain.
    
    With --json, the raw JSON-LD object is included alongside the stats.
    """
    try:
        config = load_settings(ctx.obj)
        explorer = open_explorer(document, config)
        
        if explorer.get_entity(name) is None:
            click.echo(format_error(not_found_message(explorer, name)), err=True)
            sys.exit(1)
        
        if as_json:
            output_data = {
                "entity": explorer.entity_json(name),
                "depends_on": explorer.get_direct_dependencies(name),
                "depended_on_by": explorer.get_direct_dependents(name),
                "stats": explorer.get_stats(name).model_dump(),
                "chain": [node.model_dump() for node in explorer.build_chain(name)],
            }
            click.echo(json_lib.dumps(output_data, indent=2))
        else:
            display = dict(config.get("display", {}))
            if no_color:
                display["color"] = False
            click.echo(format_entity_detail(explorer, name, display))
        
    except ModGraphError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Show failed: {e}"), err=True)
        sys.exit(1)
