"""
Candidate group model for bumpwise.

A candidate group stands for every platform build of one concrete package
version. The promoter orders groups by version only; dependency
requirements ride along for resolver tracing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from packaging.requirements import InvalidRequirement, Requirement as PkgRequirement
from packaging.utils import canonicalize_name

from bumpwise.constants import DEFAULT_PLATFORM
from bumpwise.models.version import Version, VersionLike


def normalize_name(name: str) -> str:
    """Normalize a package name according to PEP 503."""
    return canonicalize_name(name.strip())


@dataclass(frozen=True)
class CandidateGroup:
    """All platform variants of one version of one package.

    Attributes:
        name: Normalized package name.
        version: The shared version of every variant.
        dependencies: Requirement strings (``"rack>=2.0"``) declared by
            this version.
        platforms: Platforms this version is built for.
    """

    name: str
    version: Version
    dependencies: Tuple[str, ...] = ()
    platforms: Tuple[str, ...] = field(default=(DEFAULT_PLATFORM,))

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_name(self.name))
        object.__setattr__(self, "version", Version.parse(self.version))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        object.__setattr__(
            self, "platforms", tuple(self.platforms) or (DEFAULT_PLATFORM,)
        )

    @classmethod
    def create(
        cls,
        name: str,
        version: VersionLike,
        dependencies: Optional[Iterable[str]] = None,
        platforms: Optional[Iterable[str]] = None,
    ) -> "CandidateGroup":
        """Build a group, accepting version strings and any iterables."""
        return cls(
            name=name,
            version=Version.parse(version),
            dependencies=tuple(dependencies or ()),
            platforms=tuple(platforms or (DEFAULT_PLATFORM,)),
        )

    def dependency_pairs(self) -> List[Tuple[str, str]]:
        """Return ``(name, specifier)`` for each declared dependency.

        A dependency without a version constraint is reported as
        ``">= 0"``. Strings that are not valid requirements are passed
        through untouched with an empty specifier.
        """
        pairs: List[Tuple[str, str]] = []
        for raw in self.dependencies:
            try:
                req = PkgRequirement(raw)
            except InvalidRequirement:
                pairs.append((raw, ""))
                continue
            pairs.append((normalize_name(req.name), str(req.specifier) or ">= 0"))
        return pairs

    def __str__(self) -> str:
        return f"{self.name} ({self.version})"
