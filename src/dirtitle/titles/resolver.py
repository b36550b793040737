"""Short and long title derivation for directory paths."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from result import Err, Ok, Result, is_err

from dirtitle.common import create_logger, get_config_directory
from dirtitle.constants import DEFAULT_SEPARATOR, HOME_TITLE, PLACEHOLDER_TITLE
from dirtitle.settings import Settings

from .command import running_command
from .identity import UserIdentity, get_current_user
from .models import Continue, DirectoryStatError, MalformedPathError, ShortTitle, Stop, TitleError
from .overrides import OverrideStore
from .ownership import OwnerLookup, PosixOwnerLookup

logger = create_logger("resolver")

# Ancestor levels examined beyond the innermost directory, at most
MAX_ANCESTORS = 3


@dataclass(frozen=True)
class TitleContext:
    """Process-wide values resolved once before any title is computed."""

    user: UserIdentity
    overrides: OverrideStore
    separator: str = DEFAULT_SEPARATOR
    owners: OwnerLookup = field(default_factory=PosixOwnerLookup)

    @classmethod
    def from_settings(cls, settings: Settings) -> Result[TitleContext, TitleError]:
        user_result = get_current_user()
        if is_err(user_result):
            return user_result

        user = user_result.unwrap()
        config_dir = get_config_directory(user.username, user.home_dir, settings.paths)
        logger.debug("Title context resolved", user=user.username, config_dir=str(config_dir))

        return Ok(
            cls(
                user=user,
                overrides=OverrideStore(config_dir, suffix=settings.paths.title_suffix),
                separator=settings.sep,
            )
        )


class TitleResolver:
    def __init__(self, context: TitleContext) -> None:
        self.context = context

    def short_title(self, dir_path: str) -> Result[ShortTitle, TitleError]:
        """Title for exactly one directory level.

        `Stop` means the ancestor walk must not continue past this directory.
        Checks run in a fixed order: home, override, hidden or root
        placeholder, unreadable directory, ownership, plain segment name.
        """
        if dir_path == self.context.user.home_dir:
            return Ok(Stop(HOME_TITLE))

        override_result = self.context.overrides.read(dir_path)
        if is_err(override_result):
            return override_result
        override = override_result.unwrap()
        if override is not None:
            return Ok(Stop(override))

        index = dir_path.rfind("/")
        if index < 0:
            return Err(MalformedPathError(path=dir_path, message=f'bad directory path "{dir_path}"'))

        name = dir_path[index + 1 :]
        if not name or name.startswith("."):
            return Ok(Stop(PLACEHOLDER_TITLE))

        try:
            stat_result = os.stat(dir_path)
        except (FileNotFoundError, PermissionError):
            logger.debug("Directory not accessible", path=dir_path)
            return Ok(Stop(dir_path))
        except OSError as e:
            return Err(DirectoryStatError(path=dir_path, message=f"stat {dir_path}: {e.strerror or e}"))

        owner_uid = self.context.owners.owner_uid(stat_result)
        user = self.context.user
        if owner_uid is not None and not user.is_privileged and owner_uid != user.uid:
            logger.debug("Directory owned by another user", path=dir_path, owner_uid=owner_uid)
            return Ok(Stop(dir_path))

        return Ok(Continue(name))

    def long_title(self, dir_path: str) -> Result[str, TitleError]:
        """Breadcrumb of short titles, innermost first, for a path and a few of its ancestors."""
        if dir_path == self.context.user.home_dir:
            return Ok(HOME_TITLE)

        override_result = self.context.overrides.read(dir_path)
        if is_err(override_result):
            return override_result
        override = override_result.unwrap()
        if override is not None:
            return Ok(override)

        parts = dir_path.split("/")
        if not parts:
            return Err(MalformedPathError(path=dir_path, message=f'bad directory path "{dir_path}"'))

        stop_index = max(1, len(parts) - MAX_ANCESTORS)
        titles: list[str] = []
        for i in range(len(parts), stop_index, -1):
            result = self.short_title("/".join(parts[:i]))
            if is_err(result):
                return result

            match result.unwrap():
                case Stop(title):
                    titles.append(title)
                    break
                case Continue(title):
                    titles.append(title)

        return Ok(self.context.separator.join(titles))


def get_title(
    context: TitleContext,
    dir_path: str,
    long: bool = False,
    show_command: bool = False,
    environ: Mapping[str, str] | None = None,
) -> Result[str, TitleError]:
    resolver = TitleResolver(context)

    if show_command:
        command = running_command(environ)
        if command:
            return resolver.short_title(dir_path).map(lambda short: f"{short.title}: {command}")

    if long:
        return resolver.long_title(dir_path)
    return resolver.short_title(dir_path).map(lambda short: short.title)
