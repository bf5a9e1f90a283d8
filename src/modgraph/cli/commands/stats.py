"""Stats command - graph-wide metrics."""

import json as json_lib
import sys
import click
from ...presentation.text_formatter import format_global_stats
from ...utils.errors import ModGraphError
from ...utils.logging import get_logger
from ..utils import format_error, load_settings, open_explorer

logger = get_logger("cli.stats")


@click.command()
@click.argument('document', required=False, type=click.Path(exists=False))
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.pass_context
def stats(ctx, document, as_json):
    """Show entity, edge, root and hub counts for DOCUMENT."""
    try:
        config = load_settings(ctx.obj)
        explorer = open_explorer(document, config)
        global_stats = explorer.get_global_stats()
        
        if as_json:
            click.echo(json_lib.dumps(global_stats.model_dump(), indent=2))
        else:
            click.echo(format_global_stats(global_stats))
        
    except ModGraphError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Stats failed: {e}"), err=True)
        sys.exit(1)
