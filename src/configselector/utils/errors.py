"""Custom exception classes for config-selector."""

from pathlib import Path
from typing import List, Sequence, Union


class ConfigSelectorError(Exception):
    """Base exception for all config-selector errors."""
    pass


class InvalidPathError(ConfigSelectorError):
    """Raised when a literal lookup place cannot be made absolute."""

    def __init__(self, place: str, reason: str):
        self.place = place
        self.reason = reason
        super().__init__(f"Cannot resolve lookup place {place!r}: {reason}")


class FileCheckError(ConfigSelectorError):
    """Raised when a candidate cannot be checked for a reason other than absence."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot check {path}: {reason}")


class ConfigNotFoundError(ConfigSelectorError):
    """Raised when no candidate path holds the requested file."""

    def __init__(self, filename: str, attempted: Sequence[Union[str, Path]]):
        self.filename = filename
        self.attempted: List[Path] = [Path(p) for p in attempted]
        where = ", ".join(str(p) for p in self.attempted) or "no lookup places"
        super().__init__(f"No {filename or '<empty filename>'} found in {where}")


class ProfileError(ConfigSelectorError):
    """Raised when a selector profile is missing or invalid."""
    pass
