from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dirtitle.common import AppPaths, LoggingConfig
from dirtitle.constants import DEFAULT_SEPARATOR, ENV_PREFIX


class Settings(BaseSettings):
    sep: str = DEFAULT_SEPARATOR
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_ignore_empty=True,
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "AppPaths",
    "Settings",
    "get_settings",
]
