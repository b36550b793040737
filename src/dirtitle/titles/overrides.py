"""File-based title overrides."""

from __future__ import annotations

import os
from pathlib import Path

from result import Err, Ok, Result

from dirtitle.common import create_logger
from dirtitle.constants import FALLBACK_TITLE

from .models import OverrideReadError

logger = create_logger("overrides")


class OverrideStore:
    """Reads per-directory title overrides stored under a configuration directory.

    The override for `/srv/app` lives at `<config_dir>/srv/app.title`. The file
    existing at all is what stops the ancestor walk; an empty file still yields
    the fallback title.
    """

    def __init__(self, config_dir: Path, suffix: str = ".title") -> None:
        self.config_dir = config_dir
        self.suffix = suffix

    def override_file(self, dir_path: str) -> Path:
        joined = os.path.join(str(self.config_dir), dir_path.lstrip("/") + self.suffix)
        return Path(os.path.normpath(joined))

    def read(self, dir_path: str) -> Result[str | None, OverrideReadError]:
        """Read the override for exactly this directory path.

        Returns:
            Ok(title) when an override file exists.
            Ok(None) when there is no override file.
            Err(OverrideReadError) on any other I/O failure.
        """
        override_file = self.override_file(dir_path)
        try:
            content = override_file.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return Ok(None)
        except OSError as e:
            return Err(
                OverrideReadError(
                    path=dir_path,
                    override_file=str(override_file),
                    message=f"open {override_file}: {e.strerror or e}",
                )
            )

        title = content.strip() or FALLBACK_TITLE
        logger.debug("Override found", path=dir_path, override_file=str(override_file))
        return Ok(title)
