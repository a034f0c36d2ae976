"""Lookup places: symbolic markers resolved at call time, and literal paths."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union
from platformdirs import user_config_dir
from ..utils.errors import InvalidPathError
from ..utils.logging import get_logger

logger = get_logger("selector.places")


def _absolute(path: str) -> Path:
    """Make a path absolute against the working directory, normalizing it."""
    if "\x00" in path:
        raise InvalidPathError(path, "embedded null byte")
    try:
        if not os.path.isabs(path):
            path = os.path.join(os.getcwd(), path)
        return Path(os.path.normpath(path))
    except (OSError, ValueError) as e:
        raise InvalidPathError(path, str(e)) from e


def _home_dir() -> Optional[str]:
    try:
        return str(Path.home())
    except (RuntimeError, KeyError, OSError) as e:
        logger.debug(f"Home directory unavailable: {e}")
        return None


def _user_config_dir() -> Optional[str]:
    try:
        return user_config_dir()
    except (RuntimeError, KeyError, OSError) as e:
        logger.debug(f"User config directory unavailable: {e}")
        return None


def _current_dir() -> Optional[str]:
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug(f"Current directory unavailable: {e}")
        return None


class LookupPlace(str, Enum):
    """Symbolic lookup places whose actual directory is detected at runtime."""
    HOME_DIR = "Home"
    USER_CONFIG = ".config"
    CURRENT_PATH = "./"
    ETC = "/etc"

    def __str__(self) -> str:
        return self.value

    def resolve(self) -> Optional[Path]:
        """
        Resolve the marker to an absolute directory.

        Returns None when the platform cannot provide the directory; such
        places are skipped rather than reported.
        """
        if self is LookupPlace.ETC:
            return _absolute(self.value)

        if self is LookupPlace.HOME_DIR:
            directory = _home_dir()
        elif self is LookupPlace.USER_CONFIG:
            directory = _user_config_dir()
        else:
            directory = _current_dir()

        if directory is None:
            return None
        try:
            return _absolute(directory)
        except InvalidPathError as e:
            logger.debug(f"Dropping {self.name}: {e}")
            return None


@dataclass(frozen=True)
class LiteralPlace:
    """A relative or absolute filesystem path used as-is."""
    path: str

    def __str__(self) -> str:
        return self.path

    def resolve(self) -> Path:
        """Make the literal absolute; raises InvalidPathError if it cannot be."""
        return _absolute(self.path)


Place = Union[LookupPlace, LiteralPlace]
PlaceLike = Union[LookupPlace, LiteralPlace, str, "os.PathLike[str]"]


def as_lookup_place(value: PlaceLike) -> Place:
    """
    Coerce a value into a lookup place.

    Strings and literals equal to a marker value (e.g. "./" or "Home") become
    that marker, so equal tokens always compare equal. Anything else is kept
    as a literal path.
    """
    if isinstance(value, LookupPlace):
        return value
    if isinstance(value, LiteralPlace):
        value = value.path
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str):
        raise TypeError(f"Unsupported lookup place: {value!r}")
    try:
        return LookupPlace(value)
    except ValueError:
        return LiteralPlace(value)


def parse_place(token: str) -> Place:
    """Parse a place token that may also name a marker, e.g. "home_dir"."""
    member = LookupPlace.__members__.get(token.strip().upper())
    if member is not None:
        return member
    return as_lookup_place(token)


class LookupPlacesList:
    """Ordered lookup places with value-based uniqueness."""

    def __init__(self, places: Iterable[PlaceLike] = ()):
        self._places: List[Place] = []
        for place in places:
            self.add(place)

    def add(self, place: PlaceLike) -> bool:
        """Append the place unless an equal one is present. Returns True if appended."""
        place = as_lookup_place(place)
        if place in self._places:
            return False
        self._places.append(place)
        return True

    def __iter__(self) -> Iterator[Place]:
        return iter(self._places)

    def __len__(self) -> int:
        return len(self._places)

    def __contains__(self, place: object) -> bool:
        try:
            return as_lookup_place(place) in self._places
        except TypeError:
            return False

    def __getitem__(self, index: int) -> Place:
        return self._places[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LookupPlacesList):
            return self._places == other._places
        return NotImplemented

    def __str__(self) -> str:
        return ", ".join(str(p) for p in self._places)

    def __repr__(self) -> str:
        return f"LookupPlacesList([{self}])"
