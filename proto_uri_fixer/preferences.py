import json
import logging
from pathlib import Path
from typing import Optional, Union
from pydantic import ValidationError
from .config import (
    DEFAULT_FILE_RESOLUTION,
    DEFAULT_FOLDER_NAMES,
    PREFERENCES_FILE_NAME,
    SETTINGS_DIR_NAME,
    WORKSPACE_ROOT,
)
from .models import ResolutionConfiguration

logger = logging.getLogger(__name__)


class PreferencesError(Exception):
    """Raised when a project's path preferences file cannot be used."""


def default_configuration() -> ResolutionConfiguration:
    """Configuration built from the environment (see config.py)."""
    return ResolutionConfiguration(
        strategy=DEFAULT_FILE_RESOLUTION,
        folder_names=DEFAULT_FOLDER_NAMES,
    )


def load_preferences(path: Union[str, Path]) -> ResolutionConfiguration:
    """
    Parses one preferences file, e.g.:

        {"fileResolutionType": "MULTI_FOLDER", "folderNames": ["src", "gen"]}

    Keys that are left out take the built-in defaults.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise PreferencesError(f"Cannot read preferences from {path}: {e}") from e
    if not isinstance(data, dict):
        raise PreferencesError(f"Preferences in {path} must be a JSON object")
    try:
        return ResolutionConfiguration.model_validate(data)
    except ValidationError as e:
        raise PreferencesError(f"Invalid preferences in {path}: {e}") from e


class PreferenceLoader:
    """
    Loads the path preferences of workspace projects.
    Nothing is cached: each call reads the project's settings again.
    """

    def __init__(self, workspace_root: Optional[Union[str, Path]] = None,
                 defaults: Optional[ResolutionConfiguration] = None):
        self.workspace_root = Path(workspace_root) if workspace_root is not None else WORKSPACE_ROOT
        self.defaults = defaults if defaults is not None else default_configuration()

    def preferences_path(self, project: str) -> Path:
        return self.workspace_root / project / SETTINGS_DIR_NAME / PREFERENCES_FILE_NAME

    def load_for(self, project: str) -> ResolutionConfiguration:
        path = self.preferences_path(project)
        if not path.is_file():
            return self.defaults
        try:
            return load_preferences(path)
        except PreferencesError as e:
            logger.warning(f"{e}. Using defaults for project '{project}'.")
            return self.defaults
