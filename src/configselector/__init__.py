"""config-selector - Locate configuration files among well-known directories."""

from .selector import (
    ConfigFileSelector,
    LookupPlace,
    LiteralPlace,
    LookupPlacesList,
    SelectionResult,
)
from .utils.errors import (
    ConfigSelectorError,
    ConfigNotFoundError,
    FileCheckError,
    InvalidPathError,
    ProfileError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigFileSelector",
    "LookupPlace",
    "LiteralPlace",
    "LookupPlacesList",
    "SelectionResult",
    "ConfigSelectorError",
    "ConfigNotFoundError",
    "FileCheckError",
    "InvalidPathError",
    "ProfileError",
]
