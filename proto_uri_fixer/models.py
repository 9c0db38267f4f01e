from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .config import split_folder_names


class ResolutionStrategy(str, Enum):
    """How the source folder of an import target is looked up."""
    SINGLE_FOLDER = "SINGLE_FOLDER"
    MULTI_FOLDER = "MULTI_FOLDER"


class ResolutionConfiguration(BaseModel):
    """Read-only snapshot of a project's path preferences."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    strategy: ResolutionStrategy = Field(
        ResolutionStrategy.SINGLE_FOLDER,
        alias="fileResolutionType",
        description="SINGLE_FOLDER or MULTI_FOLDER",
    )
    folder_names: Tuple[str, ...] = Field(
        default_factory=tuple,
        alias="folderNames",
        description="Candidate source folders, tried in order (MULTI_FOLDER only)",
    )

    @field_validator("strategy", mode="before")
    @classmethod
    def _upper_strategy(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("folder_names", mode="before")
    @classmethod
    def _split_folder_names(cls, value):
        # The preference store keeps folder names as one comma-separated string
        if value is None:
            return ()
        if isinstance(value, str):
            return split_folder_names(value)
        return value
