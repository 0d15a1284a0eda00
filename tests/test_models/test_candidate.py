from __future__ import annotations

import pytest

from bumpwise.exceptions import VersionParseError
from bumpwise.models import CandidateGroup, Version, normalize_name


@pytest.mark.unit
class TestNormalizeName:
    """Tests for PEP 503 package name normalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Rack", "rack"),
            ("rack_test", "rack-test"),
            ("Rack.Test", "rack-test"),
            ("  rack--test ", "rack-test"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_name(raw) == expected


@pytest.mark.unit
class TestCandidateGroup:
    """Tests for CandidateGroup construction and helpers."""

    def test_create_defaults(self) -> None:
        group = CandidateGroup.create("Rack_Test", "1.0")

        assert group.name == "rack-test"
        assert group.version == Version.parse("1.0")
        assert group.dependencies == ()
        assert group.platforms == ("any",)

    def test_direct_construction_coerces(self) -> None:
        group = CandidateGroup("rack", "2.0", ["rails>=7"], [])  # type: ignore[arg-type]

        assert isinstance(group.version, Version)
        assert group.dependencies == ("rails>=7",)
        assert group.platforms == ("any",)

    def test_platforms_are_kept(self) -> None:
        group = CandidateGroup.create("nokogiri", "1.16.0", platforms=["x86_64-linux", "arm64-darwin"])

        assert group.platforms == ("x86_64-linux", "arm64-darwin")

    def test_invalid_version_raises(self) -> None:
        with pytest.raises(VersionParseError):
            CandidateGroup.create("rack", "nope")

    def test_groups_are_hashable_values(self) -> None:
        a = CandidateGroup.create("rack", "1.0", ["rails"])
        b = CandidateGroup.create("Rack", "1.0.0", ("rails",))

        assert a == b
        assert len({a, b}) == 1

    def test_groups_are_frozen(self) -> None:
        group = CandidateGroup.create("rack", "1.0")

        with pytest.raises(AttributeError):
            group.name = "other"  # type: ignore[misc]

    def test_dependency_pairs(self) -> None:
        group = CandidateGroup.create(
            "rails", "7.1.0", ["rack>=2.2", "Active_Support", "???"]
        )

        assert group.dependency_pairs() == [
            ("rack", ">=2.2"),
            ("active-support", ">= 0"),
            ("???", ""),
        ]

    def test_str(self) -> None:
        assert str(CandidateGroup.create("rack", "1.0")) == "rack (1.0)"
