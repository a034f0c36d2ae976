"""Selector profiles: YAML descriptions of a filename and its lookup places."""

import yaml
from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field, ValidationError
from ..selector.places import parse_place
from ..selector.selector import ConfigFileSelector
from ..utils.errors import ProfileError
from ..utils.logging import get_logger

logger = get_logger("config.manager")


class SelectorProfile(BaseModel):
    """Declarative selector definition."""

    filename: str = Field(..., description="Configuration filename to look for")
    places: List[str] = Field(default_factory=list, description="Marker names, marker values or literal paths, in priority order")
    etc: bool = Field(default=False, description="Also search /etc")
    etc_program: Optional[str] = Field(default=None, description="Also search /etc/<etc_program>")


def load_profile(profile_path: Union[str, Path]) -> SelectorProfile:
    """
    Load a selector profile from YAML.
    
    Args:
        profile_path: Path to the profile file
        
    Returns:
        Validated SelectorProfile
        
    Raises:
        ProfileError: If the file is missing or invalid
    """
    path = Path(profile_path)
    
    if not path.exists():
        raise ProfileError(f"Profile file not found: {profile_path}")
    
    if not path.is_file():
        raise ProfileError(f"Path is not a file: {profile_path}")
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in profile file: {e}")
    except OSError as e:
        raise ProfileError(f"Error reading profile file: {e}")
    
    if not isinstance(data, dict):
        raise ProfileError("Profile file must contain a dictionary")
    
    try:
        profile = SelectorProfile(**data)
    except ValidationError as e:
        raise ProfileError(f"Invalid profile {profile_path}: {e}")
    
    logger.info(f"Loaded profile from {profile_path}")
    return profile


def build_selector(profile: SelectorProfile, filename: Optional[str] = None) -> ConfigFileSelector:
    """Create a selector from a profile; filename overrides the profile's filename."""
    selector = ConfigFileSelector(filename or profile.filename)
    for token in profile.places:
        selector.add_lookup_place(parse_place(token))
    if profile.etc:
        selector.use_etc()
    if profile.etc_program:
        selector.use_etc_program_folder(profile.etc_program)
    return selector
