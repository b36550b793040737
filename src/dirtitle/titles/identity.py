"""Invoking user identity."""

from __future__ import annotations

import os
import pwd
from dataclasses import dataclass

from result import Err, Ok, Result

from .models import IdentityError

PRIVILEGED_UID = "0"


@dataclass(frozen=True)
class UserIdentity:
    username: str
    uid: str
    home_dir: str

    @property
    def is_privileged(self) -> bool:
        return self.uid == PRIVILEGED_UID


def get_current_user() -> Result[UserIdentity, IdentityError]:
    uid = os.getuid()
    try:
        entry = pwd.getpwuid(uid)
    except KeyError:
        return Err(IdentityError(message=f"user: unknown userid {uid}"))

    return Ok(UserIdentity(username=entry.pw_name, uid=str(entry.pw_uid), home_dir=entry.pw_dir))
