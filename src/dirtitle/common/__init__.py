"""Common models and helpers used across dirtitle modules."""

from .logging import (
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_log_file_path,
    setup_cli_logging,
)
from .models import AppPaths
from .paths import get_config_directory, get_data_directory, resolve_directory_path

__all__ = [
    "AppPaths",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_config_directory",
    "get_data_directory",
    "get_log_file_path",
    "resolve_directory_path",
    "setup_cli_logging",
]
