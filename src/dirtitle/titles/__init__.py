"""Directory title derivation."""

from .command import running_command
from .identity import UserIdentity, get_current_user
from .models import (
    Continue,
    DirectoryStatError,
    IdentityError,
    MalformedPathError,
    OverrideReadError,
    ShortTitle,
    Stop,
    TitleError,
)
from .overrides import OverrideStore
from .ownership import OwnerLookup, PosixOwnerLookup
from .resolver import TitleContext, TitleResolver, get_title

__all__ = [
    "Continue",
    "DirectoryStatError",
    "IdentityError",
    "MalformedPathError",
    "OverrideReadError",
    "OverrideStore",
    "OwnerLookup",
    "PosixOwnerLookup",
    "ShortTitle",
    "Stop",
    "TitleContext",
    "TitleError",
    "TitleResolver",
    "UserIdentity",
    "get_current_user",
    "get_title",
    "running_command",
]
