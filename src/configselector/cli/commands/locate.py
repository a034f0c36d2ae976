"""Locate command - print the path of the first matching configuration file."""

import json
import sys
import click
from ...config import OVERRIDE_ENV_VAR
from ...utils.errors import ConfigNotFoundError, ConfigSelectorError
from ...utils.logging import get_logger
from ..utils import build_cli_selector, format_error, place_options

logger = get_logger("cli.locate")


@click.command()
@click.argument('filename', required=False)
@place_options
@click.option('--path', 'override', envvar=OVERRIDE_ENV_VAR, default="",
              help='Path tried before the lookup places (absolute path, or a filename to search for)')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
def locate(filename, places, etc, etc_program, profile, override, as_json, quiet):
    """
    Locate FILENAME in the lookup places and print its path.
    
    Exits with status 1 when the file is not found and 2 when the
    environment prevents the search (unreadable directories, bad places).
    """
    try:
        selector = build_cli_selector(filename, places, etc, etc_program, profile)
        if not quiet:
            click.echo(f"Searching for {selector.filename} in: {selector.get_lookup_places()}", err=True)
        
        result = selector.select(override)
        
        if as_json:
            click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        else:
            click.echo(str(result.path))
    
    except click.ClickException:
        raise
    except ConfigNotFoundError as e:
        click.echo(format_error(str(e), "Pass --path or add lookup places with --place"), err=True)
        sys.exit(1)
    except ConfigSelectorError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(2)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Lookup failed: {e}"), err=True)
        sys.exit(2)
