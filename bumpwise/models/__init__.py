"""
Unified data model exports for bumpwise.

Example:
    >>> from bumpwise.models import CandidateGroup, LockedSpecSet, Version
"""

from __future__ import annotations

from bumpwise.models.level import BumpLevel
from bumpwise.models.version import Version, compare_versions
from bumpwise.models.candidate import CandidateGroup, normalize_name
from bumpwise.models.locked import LockedSpec, LockedSpecSet

__all__ = [
    "BumpLevel",
    "CandidateGroup",
    "LockedSpec",
    "LockedSpecSet",
    "Version",
    "compare_versions",
    "normalize_name",
]
