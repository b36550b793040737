"""Directory ownership lookup."""

from __future__ import annotations

import os
from typing import Protocol


class OwnerLookup(Protocol):
    """Capability for reading the owning user of a directory."""

    def owner_uid(self, stat_result: os.stat_result) -> str | None:
        """Return the owner's user id, or None where the platform has no such concept."""
        ...


class PosixOwnerLookup:
    def owner_uid(self, stat_result: os.stat_result) -> str | None:
        if os.name != "posix":
            return None
        return str(stat_result.st_uid)
