"""CLI utilities package."""

from typing import Optional, Sequence
import click
from ...config import DEFAULT_PLACES, PROFILE_ENV_VAR, build_selector, find_profile_path, load_profile
from ...selector import ConfigFileSelector, parse_place
from ...utils.logging import get_logger

logger = get_logger("cli.utils")


def place_options(func):
    """Attach the lookup place options shared by locate and places."""
    options = [
        click.option('--place', '-p', 'places', multiple=True,
                     help='Lookup place in priority order: home_dir, user_config, current_path, etc, or a path'),
        click.option('--etc', is_flag=True, help='Also search /etc'),
        click.option('--etc-program', metavar='NAME', help='Also search /etc/NAME'),
        click.option('--profile', type=click.Path(dir_okay=False), envvar=PROFILE_ENV_VAR,
                     help='Selector profile (YAML) providing the lookup places'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_cli_selector(
    filename: Optional[str],
    places: Sequence[str],
    etc: bool = False,
    etc_program: Optional[str] = None,
    profile: Optional[str] = None,
) -> ConfigFileSelector:
    """
    Build a selector from command line options.
    
    Places come from --place when given, otherwise from the profile
    (explicit, or discovered as config-selector.yaml), otherwise the defaults.
    
    Raises:
        ProfileError: If the profile cannot be loaded
        click.UsageError: If no filename is available
    """
    if places:
        if profile:
            logger.warning(f"Ignoring profile {profile}: --place options take precedence")
        selector = ConfigFileSelector(filename or "", *(parse_place(p) for p in places))
    else:
        profile_path = profile or find_profile_path()
        if profile_path:
            selector = build_selector(load_profile(profile_path), filename)
        else:
            selector = ConfigFileSelector(filename or "", *DEFAULT_PLACES)
    
    if not selector.filename:
        raise click.UsageError("No filename given and no profile provides one")
    
    if etc:
        selector.use_etc()
    if etc_program:
        selector.use_etc_program_folder(etc_program)
    
    logger.debug(f"Using {selector}")
    return selector


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error
