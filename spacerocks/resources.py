"""Locating the assets folder relative to the working or application directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, os.PathLike]

_MAX_LEVELS_UP = 3


def _default_app_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


def find_resource_dir(
    folder_name: PathLike, app_dir: Optional[PathLike] = None
) -> Optional[Path]:
    """Return the first existing ``folder_name`` directory, or None.

    The working directory is checked first, then the application directory
    and up to three levels above it.
    """
    in_working_dir = Path.cwd() / folder_name
    if in_working_dir.is_dir():
        return in_working_dir.resolve()

    base = Path(app_dir) if app_dir is not None else _default_app_dir()
    for level in range(_MAX_LEVELS_UP + 1):
        candidate = base.joinpath(*([".."] * level), folder_name)
        if candidate.is_dir():
            return candidate.resolve()
    return None


def search_and_set_resource_dir(
    folder_name: PathLike, app_dir: Optional[PathLike] = None
) -> bool:
    """Make the found resource directory the working directory.

    Returns True when a directory was found, False when nothing changed.
    """
    found = find_resource_dir(folder_name, app_dir)
    if found is None:
        return False
    os.chdir(found)
    return True