"""Overlay of the running shell command onto the short title."""

from __future__ import annotations

import os
from collections.abc import Mapping

from dirtitle.common import create_logger

logger = create_logger("command")

COMMAND_ENV = "BASH_COMMAND"
HISTORY_COMMAND_ENV = "HIST_LAST_COMMAND"

IGNORED_BUILTINS = frozenset({".", "source", "test", "[", "cd", "export", "eval", "printf"})

# Title-setting escape, usually $PROMPT_COMMAND itself; nested escapes confuse the terminal
TITLE_ESCAPE = "\x1b]0"

IGNORED_SUBSTRINGS = (TITLE_ESCAPE, "direnv", "dirtitle", "dir-title")


def running_command(environ: Mapping[str, str] | None = None) -> str:
    """Return the command worth showing next to the directory title, or ''."""
    env = os.environ if environ is None else environ

    command = env.get(COMMAND_ENV, "")
    if not command:
        return ""

    name = command.split(" ", 1)[0]
    if name in IGNORED_BUILTINS:
        return ""

    if command.startswith("[") or any(s in command for s in IGNORED_SUBSTRINGS):
        logger.debug("Command ignored", command=command)
        return ""

    history_command = env.get(HISTORY_COMMAND_ENV, "")
    if history_command:
        return history_command
    return command
