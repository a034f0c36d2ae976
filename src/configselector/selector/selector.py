"""Select a configuration file from a prioritized list of lookup places."""

import os
from pathlib import Path
from typing import List, Union
from .models import SelectionResult
from .places import LookupPlace, LookupPlacesList, PlaceLike
from ..utils.errors import ConfigNotFoundError, FileCheckError
from ..utils.logging import get_logger

logger = get_logger("selector")

PathLike = Union[str, "os.PathLike[str]"]


class ConfigFileSelector:
    """
    Find a configuration file by name among well-known directories.

    Places are searched in the order they were registered. Symbolic places
    (see LookupPlace) are resolved each time a lookup runs, so changes to the
    working directory or environment are picked up.

    Example:
        selector = ConfigFileSelector("app.conf", LookupPlace.CURRENT_PATH, LookupPlace.HOME_DIR)
        selector.use_etc_program_folder("app")
        path = selector.select_path(cli_args.config or "")
    """

    def __init__(self, filename: str, *places: PlaceLike):
        self._filename = filename
        self._places = LookupPlacesList(places)

    @property
    def filename(self) -> str:
        return self._filename

    def __str__(self) -> str:
        return f"ConfigFileSelector({self._filename}, [{self._places}])"

    def __repr__(self) -> str:
        return f"ConfigFileSelector(filename={self._filename!r}, places=[{self._places}])"

    def get_lookup_places(self) -> LookupPlacesList:
        """Return the registered lookup places in search order."""
        return self._places

    def add_lookup_place(self, place: PlaceLike) -> None:
        """Register an additional lookup place; places already present are ignored."""
        if self._places.add(place):
            logger.debug(f"Added lookup place {place}")

    def use_etc(self) -> None:
        """Add /etc to the lookup places."""
        self.add_lookup_place(LookupPlace.ETC)

    def use_etc_program_folder(self, program_name: str) -> None:
        """Add /etc/<program_name> to the lookup places."""
        folder = os.path.normpath(os.path.join(LookupPlace.ETC.value, program_name.lstrip("/")))
        self.add_lookup_place(folder)

    def lookup_folder_list(self) -> List[Path]:
        """
        Resolve every lookup place to an absolute directory, keeping order.

        Symbolic places the platform cannot provide are left out.

        Raises:
            InvalidPathError: If a literal place cannot be made absolute
        """
        folders = []
        for place in self._places:
            folder = place.resolve()
            if folder is None:
                logger.debug(f"Skipping unavailable lookup place {place.name}")
                continue
            folders.append(folder)
        return folders

    def lookup_file_path_list(self) -> List[Path]:
        """Return candidate file paths: each lookup folder joined with the filename."""
        return self._candidates(self._filename)

    def select_first_known_place(self) -> Path:
        """
        Return the first candidate path that exists.

        Raises:
            ConfigNotFoundError: If no candidate exists
            FileCheckError: If a candidate cannot be checked (the search stops there)
            InvalidPathError: If a literal place cannot be made absolute
        """
        return self._search(self._filename)

    def select(self, override: PathLike = "") -> SelectionResult:
        """
        Find the configuration file, preferring an override path.

        An empty override searches for the configured filename. An absolute
        override is used when it exists; otherwise the configured filename is
        searched for. Any other override is treated as a filename and searched
        for in every lookup place. The selector itself is left unchanged.
        """
        override = os.fspath(override) if override else ""
        if not override:
            return SelectionResult(path=self._search(self._filename), filename=self._filename)

        if os.path.isabs(override):
            if self._override_exists(override):
                return SelectionResult(path=Path(override), filename=os.path.basename(override), from_override=True)
            return SelectionResult(path=self._search(self._filename), filename=self._filename)

        return SelectionResult(path=self._search(override), filename=override)

    def select_path(self, override: PathLike = "") -> Path:
        """
        Find the configuration file, preferring an override path.

        Behaves like select(), except that a relative override replaces the
        selector's filename before the search and stays in place afterwards.
        """
        override = os.fspath(override) if override else ""
        if override and not os.path.isabs(override):
            self._filename = override
            return self.select_first_known_place()
        return self.select(override).path

    def is_file_exists(self, path: PathLike) -> bool:
        """
        Check whether a path exists.

        Returns False only when the path is absent. Any other failure to stat
        the path raises FileCheckError.
        """
        try:
            Path(path).stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise FileCheckError(path, e.strerror or str(e)) from e
        except ValueError as e:
            raise FileCheckError(path, str(e)) from e
        return True

    def _candidates(self, filename: str) -> List[Path]:
        return [folder / filename for folder in self.lookup_folder_list()]

    def _search(self, filename: str) -> Path:
        candidates = self._candidates(filename)
        if not filename:
            raise ConfigNotFoundError(filename, candidates)

        for candidate in candidates:
            logger.debug(f"Checking {candidate}")
            if self.is_file_exists(candidate):
                logger.info(f"Selected {candidate}")
                return candidate

        raise ConfigNotFoundError(filename, candidates)

    def _override_exists(self, override: str) -> bool:
        try:
            exists = self.is_file_exists(override)
        except FileCheckError as e:
            logger.warning(f"{e}; falling back to lookup places")
            return False
        if not exists:
            logger.info(f"Override {override} not found; falling back to lookup places")
        return exists
