"""Core domain layer."""

from release_monitor.core.article_urls import build_article_url, is_article_url
from release_monitor.core.classifier import classify_identifier
from release_monitor.core.composer import (
    DEFAULT_MESSAGE_TEMPLATE,
    NotificationComposer,
    category_label,
)
from release_monitor.core.entities import (
    CatalogSnapshot,
    CycleReport,
    ReleaseCategory,
    ReleaseEntry,
)
from release_monitor.core.errors import (
    CatalogFetchError,
    DispatchError,
    ReleaseMonitorError,
)
from release_monitor.core.interfaces import Broadcaster, CatalogSource
from release_monitor.core.seen_tracker import SeenVersionsTracker

__all__ = [
    "ReleaseCategory",
    "ReleaseEntry",
    "CatalogSnapshot",
    "CycleReport",
    "ReleaseMonitorError",
    "CatalogFetchError",
    "DispatchError",
    "CatalogSource",
    "Broadcaster",
    "SeenVersionsTracker",
    "NotificationComposer",
    "DEFAULT_MESSAGE_TEMPLATE",
    "category_label",
    "classify_identifier",
    "build_article_url",
    "is_article_url",
]
