"""Loguru setup for dirtitle.

dirtitle prints exactly one line per run, so its own records never go to
stdout. The CLI writes them to a log file when `DIRTITLE_LOGGING__ENABLED`
is set; programs importing dirtitle get nothing until they call
`dirtitle.enable_logging()`, which sends records to stderr.
"""

import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict

from dirtitle.constants import APP_NAME

from .models import AppPaths
from .paths import get_data_directory

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

LOG_ROTATION = "1 MB"
LOG_RETENTION = 3
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | [{extra[scope]}] {message} | {extra}"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    log_level: LogLevel = "INFO"
    log_file: str | None = None


def setup_cli_logging(config: LoggingConfig, paths: AppPaths) -> int:
    log_file = Path(config.log_file).expanduser() if config.log_file else get_log_file_path(paths)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler_id = _route_records(log_file, config.log_level, rotation=LOG_ROTATION, retention=LOG_RETENTION)
    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level)
    return handler_id


def enable_library_logging(level: LogLevel = "INFO") -> int:
    return _route_records(sys.stderr, level, colorize=False)


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def get_log_file_path(paths: AppPaths) -> Path:
    return get_data_directory(paths) / "logs" / f"{APP_NAME}.log"


def _route_records(sink, level: LogLevel, **options) -> int:
    # Replaces every existing handler, loguru's default stderr one included
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": APP_NAME})
    return logger.add(sink, level=level, format=LOG_FORMAT, **options)
