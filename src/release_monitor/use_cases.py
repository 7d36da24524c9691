"""Business logic use cases."""

import asyncio
import logging
from typing import Mapping, Optional

from release_monitor.core import (
    Broadcaster,
    CatalogFetchError,
    CatalogSource,
    CycleReport,
    NotificationComposer,
    ReleaseCategory,
    ReleaseEntry,
    SeenVersionsTracker,
    build_article_url,
    category_label,
    classify_identifier,
)
from release_monitor.core.article_urls import DEFAULT_LOCALE

LOGGER = logging.getLogger(__name__)


class PollCycleService:
    """Service running one catalog check: fetch, detect, notify."""

    def __init__(
        self,
        source: CatalogSource,
        broadcaster: Broadcaster,
        tracker: SeenVersionsTracker,
        composer: NotificationComposer,
        recipients: list[str],
        category_filters: Mapping[ReleaseCategory, bool],
        dispatch_delay: float = 1.0,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.source = source
        self.broadcaster = broadcaster
        self.tracker = tracker
        self.composer = composer
        self.recipients = recipients
        self.category_filters = category_filters
        self.dispatch_delay = dispatch_delay
        self.locale = locale

    async def run_once(self) -> CycleReport:
        """Run a single poll cycle.

        Fetch failures are logged and leave the tracker untouched. The first
        successful fetch only seeds the tracker.
        """
        try:
            snapshot = await self.source.fetch_catalog()
        except CatalogFetchError as e:
            LOGGER.error("Catalog fetch failed: %s", e)
            return CycleReport(fetched=False)

        was_bootstrapped = self.tracker.bootstrapped
        new_ids = self.tracker.update(snapshot.identifiers())

        if not was_bootstrapped:
            LOGGER.info("Seeded %d known versions", len(self.tracker))
            return CycleReport(fetched=True, bootstrap=True)

        report = CycleReport(fetched=True)
        if not new_ids:
            LOGGER.debug("No new versions")
            return report

        new_entries = [entry for entry in map(snapshot.find, new_ids) if entry is not None]
        new_entries.sort(key=lambda entry: entry.published_at, reverse=True)
        report.new_entries = new_entries
        LOGGER.info("Found %d new versions: %s", len(new_entries), ", ".join(new_ids))

        for entry in new_entries:
            category = classify_identifier(entry.identifier)

            if not self.composer.should_notify(category, self.category_filters):
                LOGGER.info("Skipping %s (%s notifications disabled)", entry.identifier, category.value)
                report.skipped.append(entry.identifier)
                continue

            if report.dispatched and self.dispatch_delay > 0:
                await asyncio.sleep(self.dispatch_delay)

            report.failed_deliveries += await self._dispatch(entry, category)
            report.dispatched.append(entry.identifier)

        return report

    async def _dispatch(self, entry: ReleaseEntry, category: ReleaseCategory) -> int:
        """Send notification for one entry to all recipients, return failure count."""
        url = build_article_url(entry.identifier, category, self.locale)
        message = self.composer.compose(entry, category, url)
        failures = 0

        for recipient in self.recipients:
            try:
                await self.broadcaster.send(recipient, message)
            except Exception as e:
                failures += 1
                LOGGER.error("Failed to notify %s about %s: %s", recipient, entry.identifier, e)

        LOGGER.info(
            "Notified %d/%d recipients about %s",
            len(self.recipients) - failures, len(self.recipients), entry.identifier,
        )
        return failures

    async def run_guarded(self) -> Optional[CycleReport]:
        """Run one cycle, logging unexpected errors instead of raising.

        Returns None if the cycle crashed.
        """
        try:
            return await self.run_once()
        except Exception:
            LOGGER.exception("Unexpected error during poll cycle")
            return None

    async def run_forever(self, interval: float) -> None:
        """Run cycles back to back with `interval` seconds between them.

        Cycles never overlap. Cancel the task to stop.
        """
        while True:
            await self.run_guarded()
            await asyncio.sleep(interval)


class LatestVersionsService:
    """Service answering manual "what is the latest version" queries."""

    def __init__(self, source: CatalogSource, locale: str = DEFAULT_LOCALE) -> None:
        self.source = source
        self.locale = locale

    async def latest(self) -> list[tuple[str, ReleaseEntry, str]]:
        """Fetch catalog and resolve latest release and snapshot.

        Returns:
            List of (label, entry, article URL); entries missing from the
            catalog are omitted

        Raises:
            CatalogFetchError: if the catalog could not be fetched
        """
        snapshot = await self.source.fetch_catalog()
        results = []

        for label, identifier in (
            ("Release", snapshot.latest_release),
            ("Snapshot", snapshot.latest_snapshot),
        ):
            entry = snapshot.find(identifier) if identifier else None
            if entry is None:
                continue
            url = build_article_url(entry.identifier, classify_identifier(entry.identifier), self.locale)
            results.append((label, entry, url))

        return results


def format_status(
    interval: float,
    recipients: list[str],
    category_filters: Mapping[ReleaseCategory, bool],
    template: str,
    proxy_url: Optional[str],
    known_versions: Optional[int] = None,
) -> str:
    """Render monitor status report."""
    enabled = [category_label(c) for c, on in category_filters.items() if on]

    status = {
        "Check interval": f"{interval:g} s",
        "Recipients": ", ".join(recipients) if recipients else "none",
        "Known versions": known_versions if known_versions is not None else "not running",
        "Notify about": ", ".join(enabled) if enabled else "nothing",
        "Message template": template,
        "Proxy": proxy_url or "not used",
    }

    lines = ["Release monitor status:"]
    for key, value in status.items():
        lines.append(f"{key}: {value}")
    return "\n".join(lines)
