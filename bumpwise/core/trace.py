"""
Resolver trace snapshots.

When resolver tracing is on, the promoter logs what it was given and what
it returned for every dependency it orders. Snapshots are observational
only and never feed back into ordering.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from bumpwise.constants import DEBUG_RESOLVER_ENV, FALSEY_ENV_VALUES
from bumpwise.models import BumpLevel, CandidateGroup
from bumpwise.utils.logger import get_logger

logger = get_logger("trace")


def tracing_enabled_from_env() -> bool:
    """Return True when ``BUMPWISE_DEBUG_RESOLVER`` asks for tracing."""
    value = os.environ.get(DEBUG_RESOLVER_ENV, "")
    return value.strip().lower() not in FALSEY_ENV_VALUES


@dataclass(frozen=True)
class TraceSnapshot:
    """One side (before or after) of an ``order_candidates`` call.

    Attributes:
        dependency: Dependency name.
        candidates: ``(version, ["name specifier", ...])`` per group, in
            sequence order.
        level: Active bump level name.
        mode: ``"strict"`` or ``"not_strict"``.
    """

    dependency: str
    candidates: Tuple[Tuple[str, Tuple[str, ...]], ...]
    level: str
    mode: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "dependency": self.dependency,
            "candidates": [
                {"version": version, "dependencies": list(deps)}
                for version, deps in self.candidates
            ],
            "level": self.level,
            "mode": self.mode,
        }

    def __str__(self) -> str:
        return repr(
            [
                self.dependency,
                [[version, list(deps)] for version, deps in self.candidates],
                self.level,
                self.mode,
            ]
        )


def format_trace(
    dependency: str,
    groups: Iterable[CandidateGroup],
    level: BumpLevel,
    strict: bool,
) -> TraceSnapshot:
    """Capture a :class:`TraceSnapshot` of ``groups``."""
    candidates: List[Tuple[str, Tuple[str, ...]]] = []
    for group in groups:
        deps = tuple(f"{name} {spec}".strip() for name, spec in group.dependency_pairs())
        candidates.append((str(group.version), deps))
    return TraceSnapshot(
        dependency=dependency,
        candidates=tuple(candidates),
        level=level.value,
        mode="strict" if strict else "not_strict",
    )


def emit_trace(before: TraceSnapshot, after: TraceSnapshot) -> None:
    """Log a before/after pair on the ``bumpwise.trace`` logger."""
    logger.debug("before order_candidates: %s", before)
    logger.debug(" after order_candidates: %s", after)
