"""Shared utilities: errors and logging."""

from .errors import (
    ConfigSelectorError,
    InvalidPathError,
    FileCheckError,
    ConfigNotFoundError,
    ProfileError,
)
from .logging import setup_logging, get_logger

__all__ = [
    "ConfigSelectorError",
    "InvalidPathError",
    "FileCheckError",
    "ConfigNotFoundError",
    "ProfileError",
    "setup_logging",
    "get_logger",
]
