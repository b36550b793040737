"""Filesystem locations used by dirtitle."""

from pathlib import Path

from pydantic import BaseModel

from dirtitle.constants import APP_NAME, DEFAULT_MEMORY_ROOT


class AppPaths(BaseModel):
    memory_root: Path = Path(DEFAULT_MEMORY_ROOT)
    config_dir_name: str = f".{APP_NAME}"
    data_dir_name: str = APP_NAME
    title_suffix: str = ".title"
