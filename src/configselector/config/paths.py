"""Default lookup places and discovery of the tool's own profile."""

import os
from pathlib import Path
from typing import Optional, Tuple
from ..selector.places import LookupPlace
from ..selector.selector import ConfigFileSelector
from ..utils.errors import ConfigNotFoundError
from ..utils.logging import get_logger

logger = get_logger("config.paths")

PROFILE_FILENAME = "config-selector.yaml"
PROFILE_ENV_VAR = "CONFIG_SELECTOR_PROFILE"
OVERRIDE_ENV_VAR = "CONFIG_SELECTOR_PATH"

DEFAULT_PLACES: Tuple[LookupPlace, ...] = (
    LookupPlace.CURRENT_PATH,
    LookupPlace.USER_CONFIG,
    LookupPlace.HOME_DIR,
)


def get_profile_selector() -> ConfigFileSelector:
    """Selector for config-selector.yaml: current directory, user config dir, then home."""
    return ConfigFileSelector(PROFILE_FILENAME, *DEFAULT_PLACES)


def find_profile_path() -> Optional[Path]:
    """
    Resolve the profile location.

    Priority:
    1. CONFIG_SELECTOR_PROFILE environment variable (if the file exists)
    2. config-selector.yaml in the default lookup places

    Returns:
        Path to the profile, or None if there is none
    """
    selector = get_profile_selector()
    try:
        return selector.select(os.environ.get(PROFILE_ENV_VAR, "")).path
    except ConfigNotFoundError:
        logger.debug(f"No {PROFILE_FILENAME} found")
        return None
