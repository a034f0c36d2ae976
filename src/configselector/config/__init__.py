"""Configuration module: selector profiles and their discovery."""

from .manager import SelectorProfile, load_profile, build_selector
from .paths import (
    DEFAULT_PLACES,
    OVERRIDE_ENV_VAR,
    PROFILE_ENV_VAR,
    PROFILE_FILENAME,
    find_profile_path,
    get_profile_selector,
)

__all__ = [
    "SelectorProfile",
    "load_profile",
    "build_selector",
    "DEFAULT_PLACES",
    "OVERRIDE_ENV_VAR",
    "PROFILE_ENV_VAR",
    "PROFILE_FILENAME",
    "find_profile_path",
    "get_profile_selector",
]
