"""
bumpwise — version promotion for dependency resolvers

Given the candidate versions a package index returns for one dependency,
bumpwise orders them (and optionally filters them) so that a backtracking
resolver tries the version matching the requested bump level first,
relative to the version currently in the lock file:

    • major / minor / patch bump levels
    • strict mode that drops out-of-level candidates
    • churn-avoiding placement of locked versions for packages not being
      updated
    • optional before/after tracing of every ordering
"""

from __future__ import annotations

from bumpwise.__version__ import __version__
from bumpwise.core import PromotionPolicy, VersionPromoter, iter_preferred
from bumpwise.exceptions import (
    BumpwiseError,
    ConfigError,
    InvalidBumpLevelError,
    PromoterInvariantError,
    VersionParseError,
)
from bumpwise.models import BumpLevel, CandidateGroup, LockedSpec, LockedSpecSet, Version

__all__ = [
    "__version__",
    "BumpLevel",
    "BumpwiseError",
    "CandidateGroup",
    "ConfigError",
    "InvalidBumpLevelError",
    "LockedSpec",
    "LockedSpecSet",
    "PromoterInvariantError",
    "PromotionPolicy",
    "Version",
    "VersionParseError",
    "VersionPromoter",
    "iter_preferred",
]
