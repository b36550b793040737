"""Path discovery utilities for dirtitle."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppPaths


def get_data_directory(paths: AppPaths) -> Path:
    """Get XDG data directory.

    Returns ~/.local/share/{data_dir_name} (or XDG_DATA_HOME/{data_dir_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / paths.data_dir_name


def get_config_directory(username: str, home_dir: str, paths: AppPaths) -> Path:
    """Get the directory holding title override files.

    Prefers the per-user directory on the in-memory filesystem
    ({memory_root}/{username}/.dirtitle) when it exists, otherwise
    falls back to {home_dir}/.dirtitle.
    """
    memory_dir = paths.memory_root / username / paths.config_dir_name
    if memory_dir.is_dir():
        return memory_dir
    return Path(home_dir) / paths.config_dir_name


def resolve_directory_path(dir_path: str) -> str:
    """Make a directory path absolute without following symlinks.

    Dot segments are removed and leading slashes collapse to one, so `//srv`
    and `/srv` name the same directory.
    """
    return "/" + os.path.abspath(dir_path).lstrip("/")
