"""
Settings file name handling for cfgstore.
"""

from pathlib import Path
from typing import Optional, Union

from .types import InvalidFileNameError

SETTINGS_SUFFIX = ".cfg"
DEFAULT_FILENAME = "main"
FORBIDDEN_CHARACTERS = frozenset('\\/:*?<>|')


def validate_filename(filename: Optional[str]) -> str:
    """Check a settings file name and return it without the .cfg suffix."""
    if not filename or any(char in FORBIDDEN_CHARACTERS for char in filename):
        raise InvalidFileNameError(filename)
    stem = filename[: -len(SETTINGS_SUFFIX)] if filename.endswith(SETTINGS_SUFFIX) else filename
    if not stem:
        raise InvalidFileNameError(filename)
    return stem


def settings_file_path(
    filename: str = DEFAULT_FILENAME, directory: Optional[Union[str, Path]] = None
) -> Path:
    """Full path of a settings file; the directory defaults to the working directory."""
    base = Path(directory) if directory is not None else Path.cwd()
    return base / f"{validate_filename(filename)}{SETTINGS_SUFFIX}"
