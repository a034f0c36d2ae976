"""Version command - show config-selector version."""

import click
from ... import __version__


@click.command()
def version():
    """Show config-selector version."""
    click.echo(f"config-selector version {__version__}")
