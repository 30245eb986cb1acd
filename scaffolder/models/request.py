"""Scaffold request model built once per CLI invocation."""
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ScaffoldRequest(BaseModel):
    """What to scaffold and where.

    Names are passed to cargo as given; cargo and the filesystem reject
    anything they cannot handle.
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    project_name: str
    framework_identifier: str
    additional_dependencies: List[str] = Field(default_factory=list)
    parent_dir: Path = Field(default_factory=Path.cwd)

    @property
    def project_dir(self) -> Path:
        """Directory cargo creates for the project."""
        return self.parent_dir / self.project_name
