"""Short-title variants and error models for title derivation."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class Continue:
    """Title for one level; the ancestor walk may go on to the parent."""

    title: str


@dataclass(frozen=True)
class Stop:
    """Title for one level; the ancestor walk ends here."""

    title: str


ShortTitle = Continue | Stop


class BaseTitleError(BaseModel):
    """Base title error model."""

    model_config = ConfigDict(extra="forbid")

    message: str


class MalformedPathError(BaseTitleError):
    """Directory path without a separator, or one that splits into nothing."""

    path: str


class OverrideReadError(BaseTitleError):
    """Override file exists but could not be read."""

    path: str
    override_file: str


class DirectoryStatError(BaseTitleError):
    """Unexpected failure while inspecting a directory."""

    path: str


class IdentityError(BaseTitleError):
    """Invoking user could not be resolved."""


TitleError = MalformedPathError | OverrideReadError | DirectoryStatError | IdentityError
