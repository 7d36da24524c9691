"""Tests for core entities."""

from datetime import datetime, timezone

import pytest

from release_monitor.core import CatalogSnapshot, ReleaseCategory, ReleaseEntry


def test_entry_creation() -> None:
    """Test creating a valid entry."""
    entry = ReleaseEntry(
        identifier="1.21",
        published_at=datetime(2024, 6, 13, tzinfo=timezone.utc),
        manifest_type="release",
        metadata={"sha1": "abc"},
    )
    
    assert entry.identifier == "1.21"
    assert entry.metadata["sha1"] == "abc"


def test_entry_validation() -> None:
    """Test entry validation."""
    with pytest.raises(ValueError, match="Identifier cannot be empty"):
        ReleaseEntry(identifier="", published_at=datetime.now(timezone.utc))


def test_entry_is_immutable() -> None:
    """Test entries cannot be modified after creation."""
    entry = ReleaseEntry(identifier="1.21", published_at=datetime.now(timezone.utc))
    
    with pytest.raises(AttributeError):
        entry.identifier = "1.22"  # type: ignore[misc]


def test_catalog_lookup() -> None:
    """Test catalog identifiers and lookup."""
    t = datetime(2024, 6, 13, tzinfo=timezone.utc)
    snapshot = CatalogSnapshot(
        latest_release="1.21",
        latest_snapshot="24w10a",
        entries=(ReleaseEntry("24w10a", t), ReleaseEntry("1.21", t)),
    )
    
    assert snapshot.identifiers() == ["24w10a", "1.21"]
    assert snapshot.find("1.21").identifier == "1.21"
    assert snapshot.find("missing") is None


def test_category_values() -> None:
    """Test category enum values."""
    assert ReleaseCategory("pre-release") == ReleaseCategory.PRE_RELEASE
    assert ReleaseCategory.RELEASE_CANDIDATE.value == "release-candidate"
    assert len(ReleaseCategory) == 5
