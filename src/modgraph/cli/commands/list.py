"""List command - show entities grouped by primary type."""

import json as json_lib
import sys
import click
from ...presentation.text_formatter import format_entity_list
from ...utils.errors import ModGraphError
from ...utils.logging import get_logger
from ..utils import format_error, load_settings, open_explorer

logger = get_logger("cli.list")


@click.command(name="list")
@click.argument('document', required=False, type=click.Path(exists=False))
@click.option('--search', '-s', 'query', default="", help='Case-insensitive filter on name, type or element')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.pass_context
def list_entities(ctx, document, query, as_json, no_color):
    """List entities of DOCUMENT grouped by primary type."""
    try:
        config = load_settings(ctx.obj)
        explorer = open_explorer(document, config)
        groups = explorer.search(query)
        
        if as_json:
            output_data = {
                type_tag: [entity.name for entity in entities]
                for type_tag, entities in groups.items()
            }
            click.echo(json_lib.dumps(output_data, indent=2))
        else:
            display = dict(config.get("display", {}))
            if no_color:
                display["color"] = False
            click.echo(format_entity_list(groups, display))
        
    except ModGraphError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Listing failed: {e}"), err=True)
        sys.exit(1)
