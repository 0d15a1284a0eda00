"""
Version model for bumpwise.

A :class:`Version` is a PEP 440 version with named access to its first
three release segments. Missing trailing segments read as zero, so
``Version.parse("2")`` has ``minor == 0`` and compares equal to ``2.0.0``.
"""

from __future__ import annotations

from typing import Any, Tuple, Union

from packaging.version import InvalidVersion, Version as PkgVersion

from bumpwise.exceptions import VersionParseError
from bumpwise.utils.version_utils import normalize_release, parse_release

VersionLike = Union[str, "Version", PkgVersion]


class Version:
    """Comparable package version.

    Ordering, equality and hashing delegate to
    :class:`packaging.version.Version`, which compares release segments
    lexicographically after padding with zeros.
    """

    __slots__ = ("_parsed",)

    def __init__(self, parsed: PkgVersion) -> None:
        self._parsed = parsed

    @classmethod
    def parse(cls, value: Any) -> "Version":
        """Build a :class:`Version` from a string or version object.

        Raises:
            VersionParseError: ``value`` is not a valid version.
        """
        if isinstance(value, Version):
            return value
        if isinstance(value, PkgVersion):
            return cls(value)
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise VersionParseError(repr(value))
        try:
            return cls(parse_release(value))
        except InvalidVersion as exc:
            raise VersionParseError(value) from exc

    # ------------------------------------------------------------------
    # Segment accessors
    # ------------------------------------------------------------------

    @property
    def segments(self) -> Tuple[int, ...]:
        """Raw release segments, exactly as written."""
        return tuple(self._parsed.release)

    def segment(self, index: int) -> int:
        """Return release segment ``index``, or 0 when it is missing."""
        return normalize_release(self._parsed, index + 1)[index]

    @property
    def major(self) -> int:
        return self.segment(0)

    @property
    def minor(self) -> int:
        return self.segment(1)

    @property
    def patch(self) -> int:
        return self.segment(2)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._parsed == other._parsed

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._parsed != other._parsed

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._parsed < other._parsed

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._parsed <= other._parsed

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._parsed > other._parsed

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._parsed >= other._parsed

    def __hash__(self) -> int:
        return hash(self._parsed)

    def __str__(self) -> str:
        return str(self._parsed)

    def __repr__(self) -> str:
        return f"Version({str(self._parsed)!r})"


def compare_versions(a: Version, b: Version) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
