"""
Lock-file entry models for bumpwise.

These mirror what a lock file records: one entry per package and platform.
The promoter only ever reads the version of a package's first entry, since
it is the same across platforms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from bumpwise.constants import DEFAULT_PLATFORM
from bumpwise.models.candidate import normalize_name
from bumpwise.models.version import Version, VersionLike


@dataclass(frozen=True)
class LockedSpec:
    """A package version currently fixed in the lock file."""

    name: str
    version: Version
    platform: str = DEFAULT_PLATFORM

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_name(self.name))
        object.__setattr__(self, "version", Version.parse(self.version))


LockedInput = Union[
    "LockedSpecSet",
    Mapping[str, Union[VersionLike, LockedSpec]],
    Iterable[LockedSpec],
    None,
]


class LockedSpecSet:
    """Read-only collection of :class:`LockedSpec` grouped by package name.

    Looking up an unknown name returns an empty list rather than raising,
    so an empty set means "nothing is locked".
    """

    __slots__ = ("_by_name",)

    def __init__(self, specs: Iterable[LockedSpec] = ()) -> None:
        by_name: Dict[str, List[LockedSpec]] = {}
        for spec in specs:
            by_name.setdefault(spec.name, []).append(spec)
        self._by_name: Dict[str, Tuple[LockedSpec, ...]] = {
            name: tuple(entries) for name, entries in by_name.items()
        }

    @classmethod
    def coerce(cls, value: LockedInput) -> "LockedSpecSet":
        """Build a set from another set, a name mapping, or specs.

        Mapping values may be version strings, :class:`Version` objects or
        :class:`LockedSpec` entries.
        """
        if value is None:
            return cls()
        if isinstance(value, LockedSpecSet):
            return value
        if isinstance(value, Mapping):
            specs: List[LockedSpec] = []
            for name, entry in value.items():
                if isinstance(entry, LockedSpec):
                    specs.append(entry)
                else:
                    specs.append(LockedSpec(name=name, version=Version.parse(entry)))
            return cls(specs)
        return cls(value)

    def version_for(self, name: str) -> Optional[Version]:
        """Locked version of ``name``, or ``None`` when it is not locked."""
        entries = self._by_name.get(normalize_name(name))
        if not entries:
            return None
        return entries[0].version

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._by_name

    def __iter__(self) -> Iterator[LockedSpec]:
        for entries in self._by_name.values():
            yield from entries

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        locked = ", ".join(
            f"{name}={entries[0].version}" for name, entries in sorted(self._by_name.items())
        )
        return f"LockedSpecSet({locked})"
