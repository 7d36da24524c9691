"""Mojang version manifest source."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from release_monitor.core import CatalogFetchError, CatalogSnapshot, CatalogSource, ReleaseEntry

LOGGER = logging.getLogger(__name__)

# Keys mapped onto ReleaseEntry fields; everything else goes to metadata
_ENTRY_KEYS = {"id", "type", "url", "releaseTime"}


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse manifest ISO timestamp, returning None if it is missing or invalid."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_manifest(data: Any) -> CatalogSnapshot:
    """Convert manifest JSON into a catalog snapshot.

    Raises:
        CatalogFetchError: if the document does not look like a version manifest
    """
    if not isinstance(data, dict):
        raise CatalogFetchError("Manifest is not a JSON object")

    versions = data.get("versions")
    if not isinstance(versions, list):
        raise CatalogFetchError("Manifest has no 'versions' array")

    latest = data.get("latest") or {}
    if not isinstance(latest, dict):
        raise CatalogFetchError("Manifest 'latest' is not an object")

    entries: list[ReleaseEntry] = []
    for raw in versions:
        if not isinstance(raw, dict) or not raw.get("id"):
            raise CatalogFetchError(f"Malformed version entry: {raw!r}")

        published_at = parse_timestamp(raw.get("releaseTime")) or parse_timestamp(raw.get("time"))
        if published_at is None:
            LOGGER.debug("No usable release time for %s", raw["id"])
            published_at = datetime.min.replace(tzinfo=timezone.utc)

        entries.append(ReleaseEntry(
            identifier=str(raw["id"]),
            published_at=published_at,
            manifest_type=str(raw.get("type", "")),
            url=str(raw.get("url", "")),
            metadata={k: v for k, v in raw.items() if k not in _ENTRY_KEYS},
        ))

    return CatalogSnapshot(
        latest_release=str(latest.get("release", "")),
        latest_snapshot=str(latest.get("snapshot", "")),
        entries=tuple(entries),
    )


class MojangManifestSource(CatalogSource):
    """Fetch the Minecraft version manifest over HTTP."""

    def __init__(
        self,
        manifest_url: str,
        timeout: float = 10.0,
        proxy_url: Optional[str] = None,
    ) -> None:
        self.manifest_url = manifest_url
        self.timeout = timeout
        self.proxy_url = proxy_url

    def _client(self) -> httpx.AsyncClient:
        if self.proxy_url:
            return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True, proxy=self.proxy_url)
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def fetch_catalog(self) -> CatalogSnapshot:
        """Download and parse the manifest."""
        try:
            client = self._client()
        except (ValueError, httpx.InvalidURL) as e:
            # e.g. proxy URL without scheme
            raise CatalogFetchError(f"Invalid HTTP client settings: {e}") from e

        async with client:
            try:
                response = await client.get(self.manifest_url)
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise CatalogFetchError(f"Failed to fetch {self.manifest_url}: {e}") from e
            except ValueError as e:
                raise CatalogFetchError(f"Manifest is not valid JSON: {e}") from e

        snapshot = parse_manifest(data)
        LOGGER.debug("Fetched manifest with %d versions", len(snapshot.entries))
        return snapshot
