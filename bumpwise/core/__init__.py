"""
Core functionality exports for bumpwise.

    from bumpwise.core import VersionPromoter
"""

from __future__ import annotations

from bumpwise.core.promoter import PromotionPolicy, VersionPromoter, iter_preferred
from bumpwise.core.trace import TraceSnapshot, format_trace

__all__ = [
    "PromotionPolicy",
    "TraceSnapshot",
    "VersionPromoter",
    "format_trace",
    "iter_preferred",
]
