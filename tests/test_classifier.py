"""Tests for release category detection."""

import pytest

from release_monitor.core import ReleaseCategory, classify_identifier


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("1.21.2", ReleaseCategory.RELEASE),
        ("1.21", ReleaseCategory.RELEASE),
        ("24w10a", ReleaseCategory.SNAPSHOT),
        ("1.21-pre1", ReleaseCategory.PRE_RELEASE),
        ("1.21-rc.2", ReleaseCategory.RELEASE_CANDIDATE),
        ("1.20.5-rc1", ReleaseCategory.RELEASE_CANDIDATE),
        ("whatever", ReleaseCategory.UNKNOWN),
    ],
)
def test_classify_known_shapes(identifier: str, expected: ReleaseCategory) -> None:
    """Test classification of typical identifiers."""
    assert classify_identifier(identifier) == expected


def test_classify_is_case_insensitive() -> None:
    """Test that input is lowercased before matching."""
    assert classify_identifier("24W10A") == ReleaseCategory.SNAPSHOT
    assert classify_identifier("1.21-PRE1") == ReleaseCategory.PRE_RELEASE
    assert classify_identifier("1.21-RC1") == ReleaseCategory.RELEASE_CANDIDATE


def test_classify_priority_order() -> None:
    """Test that substring markers win over numeric shapes."""
    # Contains both markers: "pre" is checked first
    assert classify_identifier("1.21-pre-rc1") == ReleaseCategory.PRE_RELEASE
    # Snapshot-like code with a marker is not a snapshot
    assert classify_identifier("24w10a-rc") == ReleaseCategory.RELEASE_CANDIDATE


@pytest.mark.parametrize(
    "identifier",
    [
        "",
        "1",
        "1.21.2.3",
        "1.21.",
        "24w10",
        "24w10ab",
        "1.21.2\n",
        "b1.7.3",
        "3D Shareware v1.34",
        "1.RV-Pre1",
    ],
)
def test_classify_is_total(identifier: str) -> None:
    """Test that odd inputs never raise and yield a category."""
    assert classify_identifier(identifier) in set(ReleaseCategory)


def test_classify_odd_shapes_are_unknown() -> None:
    """Test that near-miss shapes fall through to unknown."""
    for identifier in ("", "1.21.2.3", "24w10", "24w10ab", "1.21.2\n", "b1.7.3"):
        assert classify_identifier(identifier) == ReleaseCategory.UNKNOWN
