"""Version promotion for dependency resolution.

Given one dependency and the candidate groups an index returned for it,
:class:`VersionPromoter` orders (and in strict mode, trims) the candidates
so a backtracking resolver reaches the versions the user meant to prefer
first: the requested bump level relative to the locked version. Nothing is
ever removed in loose mode, so the resolver can still fall back to other
versions when the preferred ones do not fit the whole graph.

The returned sequence is *most preferred last*. A resolver consuming it
tries candidates from the tail; :func:`iter_preferred` walks a sequence in
that order.

Typical usage::

    promoter = VersionPromoter(
        {"rack": "2.1.0"},
        unlock_gems=["rails"],
        level="minor",
        strict=True,
    )
    ordered = promoter.order_candidates("rack", groups)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import (
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
)

from bumpwise.core.trace import emit_trace, format_trace, tracing_enabled_from_env
from bumpwise.exceptions import PromoterInvariantError
from bumpwise.models import (
    BumpLevel,
    CandidateGroup,
    LockedSpecSet,
    Version,
    compare_versions,
    normalize_name,
)
from bumpwise.models.locked import LockedInput
from bumpwise.utils.logger import get_logger

logger = get_logger("promoter")

__all__ = [
    "PromotionPolicy",
    "VersionPromoter",
    "iter_preferred",
]

_CacheKey = Tuple[str, FrozenSet[CandidateGroup]]


@dataclass(frozen=True)
class PromotionPolicy:
    """Immutable resolution policy for one resolution run.

    Attributes:
        level: Requested bump level. Strings are coerced on construction.
        strict: Drop candidates outside the level instead of demoting them.
        locked: Currently locked versions, by package name.
        unlocked: Package names the user asked to update. Empty means
            every package counts as unlocked.
    """

    level: BumpLevel = BumpLevel.MAJOR
    strict: bool = False
    locked: LockedSpecSet = field(default_factory=LockedSpecSet)
    unlocked: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", BumpLevel.coerce(self.level))
        object.__setattr__(self, "strict", bool(self.strict))
        object.__setattr__(self, "locked", LockedSpecSet.coerce(self.locked))
        object.__setattr__(
            self, "unlocked", frozenset(normalize_name(n) for n in self.unlocked)
        )

    def unlocking(self, name: str) -> bool:
        """Return True if ``name`` is free to move away from its lock."""
        return not self.unlocked or normalize_name(name) in self.unlocked


class VersionPromoter:
    """Orders candidate versions to favour a bump level.

    Args:
        locked_specs: Every currently locked package, as a
            :class:`LockedSpecSet`, a ``{name: version}`` mapping, or an
            iterable of :class:`LockedSpec`. Should cover all locked
            packages even when everything is being updated.
        unlock_gems: Names being unlocked. If empty, all packages are
            considered unlocked.
        level: ``major`` (default), ``minor`` or ``patch``.
        strict: When True, candidates outside ``level`` are removed
            rather than merely ordered away. This can leave a resolver
            with no solution even though the index has suitable versions.
        debug: Force resolver tracing on or off. ``None`` defers to the
            ``BUMPWISE_DEBUG_RESOLVER`` environment variable at call time.
            Snapshots are DEBUG records on the ``bumpwise.trace`` logger, so
            the host must attach a handler and enable DEBUG there (for
            example with :func:`bumpwise.utils.setup_logging`) to see them.
        cache: Memoize results per dependency for the promoter's lifetime.

    Raises:
        InvalidBumpLevelError: ``level`` is not a known bump level.
    """

    def __init__(
        self,
        locked_specs: LockedInput = None,
        unlock_gems: Optional[Iterable[str]] = None,
        *,
        level: Any = BumpLevel.MAJOR,
        strict: bool = False,
        debug: Optional[bool] = None,
        cache: bool = True,
    ) -> None:
        self._policy = PromotionPolicy(
            level=level,
            strict=strict,
            locked=LockedSpecSet.coerce(locked_specs),
            unlocked=frozenset(unlock_gems or ()),
        )
        self._debug = debug
        self._cache_enabled = cache
        self._cache: Dict[_CacheKey, Tuple[CandidateGroup, ...]] = {}
        self._cache_lock = threading.Lock()

    @classmethod
    def from_policy(
        cls,
        policy: PromotionPolicy,
        *,
        debug: Optional[bool] = None,
        cache: bool = True,
    ) -> "VersionPromoter":
        """Build a promoter around an existing :class:`PromotionPolicy`."""
        return cls(
            policy.locked,
            policy.unlocked,
            level=policy.level,
            strict=policy.strict,
            debug=debug,
            cache=cache,
        )

    # ------------------------------------------------------------------
    # Policy accessors
    # ------------------------------------------------------------------

    @property
    def policy(self) -> PromotionPolicy:
        return self._policy

    @property
    def level(self) -> BumpLevel:
        return self._policy.level

    @property
    def strict(self) -> bool:
        return self._policy.strict

    @property
    def locked_specs(self) -> LockedSpecSet:
        return self._policy.locked

    @property
    def unlock_gems(self) -> FrozenSet[str]:
        return self._policy.unlocked

    def is_major(self) -> bool:
        return self.level is BumpLevel.MAJOR

    def is_minor(self) -> bool:
        return self.level is BumpLevel.MINOR

    def is_patch(self) -> bool:
        return self.level is BumpLevel.PATCH

    def unlocking(self, name: str) -> bool:
        """Return True if ``name`` is being unlocked in this run."""
        return self._policy.unlocking(name)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def order_candidates(
        self,
        dependency_name: str,
        candidate_groups: Iterable[CandidateGroup],
    ) -> List[CandidateGroup]:
        """Return ``candidate_groups`` ordered for the resolver.

        In strict mode, groups outside the bump level are filtered out
        first. Results are memoized per dependency name and candidate set.
        The caller's collection is never modified.

        Args:
            dependency_name: Package the candidates belong to.
            candidate_groups: Groups for that package, one per version.

        Returns:
            A new list, most preferred candidate last.

        Raises:
            PromoterInvariantError: The candidate set holds two groups
                that both equal the locked version.
        """
        name = normalize_name(dependency_name)
        groups = list(candidate_groups)

        if not self._cache_enabled:
            return self._compute(name, groups)

        key: _CacheKey = (name, frozenset(groups))
        with self._cache_lock:
            cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        result = self._compute(name, groups)
        with self._cache_lock:
            # A racing call may have stored first; both values are equal.
            stored = self._cache.setdefault(key, tuple(result))
        return list(stored)

    def clear_cache(self) -> None:
        """Forget every memoized ordering."""
        with self._cache_lock:
            self._cache.clear()

    def _tracing(self) -> bool:
        if self._debug is not None:
            return self._debug
        return tracing_enabled_from_env()

    def _compute(
        self,
        name: str,
        groups: List[CandidateGroup],
    ) -> List[CandidateGroup]:
        locked_version = self._policy.locked.version_for(name)
        tracing = self._tracing()
        before = (
            format_trace(name, groups, self.level, self.strict) if tracing else None
        )

        if self.strict:
            groups = self._filter(groups, locked_version)
        result = self._sort(name, groups, locked_version)

        if before is not None:
            emit_trace(before, format_trace(name, result, self.level, self.strict))

        logger.debug(
            "Ordered %d candidate(s) for %s (locked=%s, level=%s, strict=%s)",
            len(result),
            name,
            locked_version,
            self.level,
            self.strict,
        )
        return result

    def _filter(
        self,
        groups: Sequence[CandidateGroup],
        locked_version: Optional[Version],
    ) -> List[CandidateGroup]:
        if locked_version is None or self.is_major():
            return list(groups)

        must_match = self.level.must_match_segments
        kept = [
            group
            for group in groups
            if all(
                group.version.segment(idx) == locked_version.segment(idx)
                for idx in must_match
            )
            and group.version >= locked_version
        ]
        if len(kept) != len(groups):
            logger.debug(
                "Strict %s filter dropped %d candidate(s)",
                self.level,
                len(groups) - len(kept),
            )
        return kept

    def _sort(
        self,
        name: str,
        groups: Sequence[CandidateGroup],
        locked_version: Optional[Version],
    ) -> List[CandidateGroup]:
        if locked_version is None or self.is_major():
            return sorted(groups, key=lambda group: group.version)

        unlocking = self.unlocking(name)

        def compare(a: CandidateGroup, b: CandidateGroup) -> int:
            return self._compare(a.version, b.version, locked_version, unlocking)

        return sorted(groups, key=cmp_to_key(compare))

    def _compare(
        self,
        a_ver: Version,
        b_ver: Version,
        locked_version: Version,
        unlocking: bool,
    ) -> int:
        if a_ver < locked_version or b_ver < locked_version:
            return compare_versions(a_ver, b_ver)
        if a_ver.major != b_ver.major:
            return compare_versions(b_ver, a_ver)
        if not self.is_patch() and a_ver.minor != b_ver.minor:
            return compare_versions(b_ver, a_ver)
        if not unlocking and locked_version in (a_ver, b_ver):
            return _sort_matching_to_end(locked_version, a_ver, b_ver)
        return compare_versions(a_ver, b_ver)


def _sort_matching_to_end(version: Version, a_ver: Version, b_ver: Version) -> int:
    """Order the one version equal to ``version`` after the other."""
    a_matches = a_ver == version
    b_matches = b_ver == version
    if a_matches and not b_matches:
        return 1
    if b_matches and not a_matches:
        return -1
    raise PromoterInvariantError(version, a_ver, b_ver)


def iter_preferred(ordered: Sequence[CandidateGroup]) -> Iterator[CandidateGroup]:
    """Yield ``ordered`` in the order a tail-first resolver tries it."""
    return reversed(list(ordered))
