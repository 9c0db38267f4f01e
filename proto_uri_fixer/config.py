import os
from pathlib import Path
from typing import Tuple
from dotenv import load_dotenv

# Load environment variables from .env file in the project root
load_dotenv()

# --- Project Paths ---
WORKSPACE_ROOT = Path(os.getenv("PROTO_WORKSPACE_ROOT", ".")).resolve()

# --- Preferences ---
# Per-project preferences live in <workspace>/<project>/.settings/<file>
SETTINGS_DIR_NAME = ".settings"
PREFERENCES_FILE_NAME = os.getenv("PROTO_PREFERENCES_FILE", "proto_paths.json")

_RESOLUTION_TYPES = {"SINGLE_FOLDER", "MULTI_FOLDER"}

DEFAULT_FILE_RESOLUTION = os.getenv("PROTO_FILE_RESOLUTION", "SINGLE_FOLDER").strip().upper()
if DEFAULT_FILE_RESOLUTION not in _RESOLUTION_TYPES:
    DEFAULT_FILE_RESOLUTION = "SINGLE_FOLDER"


def split_folder_names(value: str) -> Tuple[str, ...]:
    """Splits a comma-separated folder list, dropping blanks."""
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


DEFAULT_FOLDER_NAMES: Tuple[str, ...] = split_folder_names(os.getenv("PROTO_FOLDER_NAMES", ""))

# --- Logging ---
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = os.getenv("PROTO_LOG_LEVEL", "INFO").strip().upper()
if LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
    LOG_LEVEL = "INFO"
