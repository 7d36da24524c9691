"""Tracker for already seen versions to avoid duplicate notifications."""

from typing import Iterable


class SeenVersionsTracker:
    """Track version identifiers already present in the catalog.

    State lives in memory for the lifetime of the process. The first update
    only seeds the set, so a fresh start does not announce the whole catalog
    history.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._bootstrapped = False

    @property
    def bootstrapped(self) -> bool:
        return self._bootstrapped

    def __len__(self) -> int:
        return len(self._seen)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._seen

    def is_seen(self, identifier: str) -> bool:
        """Check if version was already seen."""
        return identifier in self._seen

    def update(self, identifiers: Iterable[str]) -> list[str]:
        """Record catalog identifiers and return the ones not seen before.

        Args:
            identifiers: Identifiers of one catalog snapshot, in catalog order

        Returns:
            New identifiers in input order. Always empty on the first call.
        """
        new_identifiers: list[str] = []

        for identifier in identifiers:
            if identifier in self._seen:
                continue
            self._seen.add(identifier)
            new_identifiers.append(identifier)

        if not self._bootstrapped:
            self._bootstrapped = True
            return []

        return new_identifiers

