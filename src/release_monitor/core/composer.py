"""Notification message rendering and category filtering."""

from typing import Mapping

from release_monitor.core.entities import ReleaseCategory, ReleaseEntry

DEFAULT_MESSAGE_TEMPLATE = "[MC Update] New Minecraft {type}: {version}\nArticle: {url}"

CATEGORY_LABELS = {
    ReleaseCategory.RELEASE: "Release",
    ReleaseCategory.SNAPSHOT: "Snapshot",
    ReleaseCategory.PRE_RELEASE: "Pre-release",
    ReleaseCategory.RELEASE_CANDIDATE: "Release Candidate",
}


def category_label(category: ReleaseCategory) -> str:
    """Human-readable category name (raw value for unlabeled categories)."""
    return CATEGORY_LABELS.get(category, category.value)


class NotificationComposer:
    """Render notification messages from a user template.

    Supported placeholders: {type}, {version}, {url}. Any other braces in the
    template are left untouched.
    """

    def __init__(self, template: str = DEFAULT_MESSAGE_TEMPLATE) -> None:
        self.template = template

    def compose(self, entry: ReleaseEntry, category: ReleaseCategory, url: str) -> str:
        """Render message for one catalog entry."""
        return (
            self.template
            .replace("{type}", category_label(category))
            .replace("{version}", entry.identifier)
            .replace("{url}", url)
        )

    @staticmethod
    def should_notify(
        category: ReleaseCategory, filters: Mapping[ReleaseCategory, bool]
    ) -> bool:
        """
        Check category against per-category toggles.

        Categories without a toggle (UNKNOWN) are always notifiable; callers
        that want to suppress them must do it themselves.
        """
        return filters.get(category, True)
