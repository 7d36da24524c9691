"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class ReleaseCategory(str, Enum):
    """Release stage inferred from a version identifier."""

    RELEASE = "release"
    SNAPSHOT = "snapshot"
    PRE_RELEASE = "pre-release"
    RELEASE_CANDIDATE = "release-candidate"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ReleaseEntry:
    """One version record from the catalog."""

    identifier: str
    published_at: datetime
    manifest_type: str = ""
    url: str = ""
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("Identifier cannot be empty")


@dataclass(frozen=True)
class CatalogSnapshot:
    """Catalog contents from a single fetch."""

    latest_release: str
    latest_snapshot: str
    entries: tuple[ReleaseEntry, ...]

    def identifiers(self) -> list[str]:
        return [entry.identifier for entry in self.entries]

    def find(self, identifier: str) -> Optional[ReleaseEntry]:
        """Return the entry with given identifier, if present."""
        for entry in self.entries:
            if entry.identifier == identifier:
                return entry
        return None


@dataclass
class CycleReport:
    """Outcome of one poll cycle."""

    fetched: bool
    bootstrap: bool = False
    new_entries: list[ReleaseEntry] = field(default_factory=list)
    dispatched: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed_deliveries: int = 0
