"""Pydantic model for selection results."""

from pathlib import Path
from pydantic import BaseModel, Field


class SelectionResult(BaseModel):
    """A resolved configuration file path and the filename it was found under."""
    path: Path = Field(..., description="Absolute path of the selected file")
    filename: str = Field(..., description="Filename that was searched for")
    from_override: bool = Field(default=False, description="True when the override path was used directly")
