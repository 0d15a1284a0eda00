from __future__ import annotations

import pytest
from packaging.version import Version as PkgVersion

from bumpwise.exceptions import VersionParseError
from bumpwise.models import Version, compare_versions


@pytest.mark.unit
class TestVersionParse:
    """Tests for Version.parse."""

    def test_parse_string(self) -> None:
        version = Version.parse("2.1.0")

        assert version.segments == (2, 1, 0)
        assert (version.major, version.minor, version.patch) == (2, 1, 0)

    def test_parse_strips_whitespace(self) -> None:
        assert Version.parse(" 1.0 ") == Version.parse("1.0")

    def test_parse_returns_same_instance(self) -> None:
        version = Version.parse("1.0")

        assert Version.parse(version) is version

    def test_parse_packaging_version(self) -> None:
        version = Version.parse(PkgVersion("3.2"))

        assert version == Version.parse("3.2")
        assert version.minor == 2

    def test_parse_int(self) -> None:
        assert Version.parse(3) == Version.parse("3")

    @pytest.mark.parametrize("value", ["not-a-version", "1.0.0.x", "", None, True, 1.5])
    def test_invalid_values_raise(self, value: object) -> None:
        with pytest.raises(VersionParseError):
            Version.parse(value)

    def test_error_carries_raw_version(self) -> None:
        with pytest.raises(VersionParseError) as exc_info:
            Version.parse("bogus")

        assert exc_info.value.version == "bogus"
        assert "Invalid version string" in str(exc_info.value)


@pytest.mark.unit
class TestVersionSegments:
    """Tests for named segment accessors on short and long versions."""

    def test_missing_segments_default_to_zero(self) -> None:
        version = Version.parse("2")

        assert version.segments == (2,)
        assert version.major == 2
        assert version.minor == 0
        assert version.patch == 0

    def test_segment_beyond_release(self) -> None:
        assert Version.parse("1.2").segment(5) == 0

    def test_fourth_segment(self) -> None:
        version = Version.parse("1.2.3.4")

        assert version.segment(3) == 4
        assert version.patch == 3


@pytest.mark.unit
class TestVersionComparison:
    """Tests for ordering, equality and hashing."""

    def test_numeric_segment_ordering(self) -> None:
        assert Version.parse("1.10.0") > Version.parse("1.9.0")
        assert Version.parse("1.9.0") < Version.parse("1.10.0")

    def test_trailing_zeros_are_equal(self) -> None:
        assert Version.parse("2") == Version.parse("2.0.0")
        assert hash(Version.parse("2")) == hash(Version.parse("2.0.0"))
        assert len({Version.parse("2"), Version.parse("2.0"), Version.parse("2.0.0")}) == 1

    def test_prerelease_sorts_before_release(self) -> None:
        rc = Version.parse("2.0.0rc1")

        assert rc < Version.parse("2.0.0")
        assert rc > Version.parse("1.9.9")

    def test_le_ge_ne(self) -> None:
        a, b = Version.parse("1.0"), Version.parse("1.1")

        assert a <= b and b >= a
        assert a <= Version.parse("1.0.0")
        assert a != b

    def test_not_equal_to_strings(self) -> None:
        assert Version.parse("1.0") != "1.0"

    def test_ordering_against_string_raises(self) -> None:
        with pytest.raises(TypeError):
            Version.parse("1.0") < "2.0"  # noqa: B015

    @pytest.mark.parametrize(
        "a,b,expected",
        [("1.0", "2.0", -1), ("2.0", "1.0", 1), ("1.0", "1.0.0", 0)],
    )
    def test_compare_versions(self, a: str, b: str, expected: int) -> None:
        assert compare_versions(Version.parse(a), Version.parse(b)) == expected

    def test_str_and_repr(self) -> None:
        version = Version.parse("1.2.3")

        assert str(version) == "1.2.3"
        assert repr(version) == "Version('1.2.3')"
