"""Configuration file selector: lookup places and the selector itself."""

from .places import LookupPlace, LiteralPlace, LookupPlacesList, as_lookup_place, parse_place
from .models import SelectionResult
from .selector import ConfigFileSelector

__all__ = [
    "ConfigFileSelector",
    "LookupPlace",
    "LiteralPlace",
    "LookupPlacesList",
    "SelectionResult",
    "as_lookup_place",
    "parse_place",
]
