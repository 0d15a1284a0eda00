"""
Bump level enumeration.

The bump level is the granularity at which a locked version may advance.
It is a closed set; anything else is rejected when a policy is built.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple

from bumpwise.exceptions import InvalidBumpLevelError


class BumpLevel(Enum):
    """How far a package may move away from its locked version."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @classmethod
    def coerce(cls, value: Any) -> "BumpLevel":
        """Convert ``value`` to a :class:`BumpLevel`.

        Accepts members and their names or values in any case, with an
        optional leading colon (``":minor"``).

        Raises:
            InvalidBumpLevelError: ``value`` names no known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lstrip(":").lower()
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidBumpLevelError(value)

    @property
    def must_match_segments(self) -> Tuple[int, ...]:
        """Release segment indexes a strict-mode candidate shares with the lock."""
        if self is BumpLevel.MINOR:
            return (0,)
        if self is BumpLevel.PATCH:
            return (0, 1)
        return ()

    def __str__(self) -> str:
        return self.value
