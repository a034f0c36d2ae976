"""Places command - show resolved lookup folders and candidate paths."""

import json
import sys
import click
from ...utils.errors import ConfigSelectorError, FileCheckError
from ...utils.logging import get_logger
from ..utils import build_cli_selector, format_error, place_options

logger = get_logger("cli.places")


@click.command()
@click.argument('filename', required=False)
@place_options
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
def places(filename, places, etc, etc_program, profile, as_json):
    """Show where FILENAME would be looked for, in priority order."""
    try:
        selector = build_cli_selector(filename, places, etc, etc_program, profile)
        entries = []
        for candidate in selector.lookup_file_path_list():
            try:
                status = "found" if selector.is_file_exists(candidate) else "missing"
            except FileCheckError as e:
                logger.debug(str(e))
                status = "error"
            entries.append({
                "folder": str(candidate.parent),
                "candidate": str(candidate),
                "status": status,
            })
        
        if as_json:
            click.echo(json.dumps({
                "filename": selector.filename,
                "places": [str(p) for p in selector.get_lookup_places()],
                "candidates": entries,
            }, indent=2))
            return
        
        click.echo(f"Lookup places for {selector.filename}: {selector.get_lookup_places()}")
        click.echo("-" * 60)
        if not entries:
            click.echo("(no lookup folders available)")
        for entry in entries:
            click.echo(f"  [{entry['status']:>7}] {entry['candidate']}")
    
    except click.ClickException:
        raise
    except ConfigSelectorError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(2)
