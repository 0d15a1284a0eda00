"""
Version helpers for bumpwise.

This module wraps PEP 440 parsing from :mod:`packaging` and classifies how
far a candidate version moves away from a locked version.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from packaging.version import InvalidVersion, Version as PkgVersion, parse


def parse_release(value: str) -> PkgVersion:
    """Parse a version string into a PEP 440 Version object.

    Raises:
        InvalidVersion: ``value`` is not a valid PEP 440 version.
    """
    parsed = parse(value.strip())
    if not isinstance(parsed, PkgVersion):
        raise InvalidVersion(value)
    return parsed


def normalize_release(version: PkgVersion, width: int = 3) -> Tuple[int, ...]:
    """Pad or truncate a release segment to ``width`` integers.

    Missing trailing segments count as zero, so ``2`` becomes ``(2, 0, 0)``.
    """
    release = tuple(version.release)
    if len(release) >= width:
        return release[:width]
    return release + (0,) * (width - len(release))


def classify_bump(locked: Optional[Any], candidate: Optional[Any]) -> str:
    """Describe the move from ``locked`` to ``candidate``.

    Both arguments are :class:`bumpwise.models.Version` instances (or
    ``None``).

    Returns:
        One of:
            - ``"new"``       : Nothing is locked
            - ``"same"``      : Candidate equals the locked version
            - ``"downgrade"`` : Candidate is below the locked version
            - ``"major"``     : Major segment changes
            - ``"minor"``     : Minor segment changes
            - ``"patch"``     : Patch segment changes
            - ``"update"``    : Higher, but only beyond the patch segment
              (pre-release, post-release or a fourth segment)
            - ``"unknown"``   : No candidate given

    Examples:
        >>> from bumpwise.models import Version
        >>> classify_bump(Version.parse("1.0.0"), Version.parse("2.0"))
        'major'
        >>> classify_bump(None, Version.parse("1.0"))
        'new'
    """
    if candidate is None:
        return "unknown"

    if locked is None:
        return "new"

    if candidate == locked:
        return "same"

    if candidate < locked:
        return "downgrade"

    if candidate.major != locked.major:
        return "major"

    if candidate.minor != locked.minor:
        return "minor"

    if candidate.patch != locked.patch:
        return "patch"

    return "update"
