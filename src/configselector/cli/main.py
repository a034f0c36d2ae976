"""Main CLI entry point for config-selector."""

import logging
import click
from .commands.locate import locate
from .commands.places import places
from .commands.version import version as version_command
from .. import __version__
from ..utils.logging import setup_logging, get_logger

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="config-selector", message="%(prog)s version %(version)s")
@click.option('--verbose', '-v', is_flag=True, help='Log lookup details to stderr')
def cli(verbose):
    """config-selector - Locate configuration files."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


cli.add_command(locate)
cli.add_command(places)
cli.add_command(version_command)
