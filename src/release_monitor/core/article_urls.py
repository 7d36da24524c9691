"""Release notes article URL synthesis.

Minecraft.net does not publish article links in the version manifest, so the
URL is derived from the identifier naming convention. Identifiers that do not
follow the convention get a placeholder string instead of a URL.
"""

from release_monitor.core.entities import ReleaseCategory

ARTICLE_BASE_URL = "https://www.minecraft.net/{locale}/article/"
DEFAULT_LOCALE = "en-us"
UNRECOGNIZED_PREFIX = "unrecognized category: "

_STAGE_SLUGS = {
    ReleaseCategory.PRE_RELEASE: "pre-release",
    ReleaseCategory.RELEASE_CANDIDATE: "release-candidate",
}


def _slugify(version: str) -> str:
    return version.replace(".", "-")


def _placeholder(identifier: str) -> str:
    return f"{UNRECOGNIZED_PREFIX}{identifier}"


def _stage_number(suffix: str) -> str:
    """Extract sequence number from suffix like 'rc.2' (defaults to '1')."""
    if "." in suffix:
        number = suffix.split(".")[1]
        if number:
            return number
    return "1"


def build_article_url(
    identifier: str,
    category: ReleaseCategory,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """
    Build release notes article URL for a version.

    Args:
        identifier: Version identifier, e.g. "1.21.2" or "1.21-rc.2"
        category: Category detected for the identifier
        locale: Minecraft.net locale segment

    Returns:
        Article URL, or "unrecognized category: <identifier>" placeholder
        when the identifier does not fit its category
    """
    base_url = ARTICLE_BASE_URL.format(locale=locale)

    if category == ReleaseCategory.RELEASE:
        return f"{base_url}minecraft-java-edition-{_slugify(identifier)}"

    if category == ReleaseCategory.SNAPSHOT:
        return f"{base_url}minecraft-snapshot-{identifier}"

    if category in _STAGE_SLUGS:
        base, sep, suffix = identifier.partition("-")
        if not sep or not base:
            return _placeholder(identifier)
        stage = _STAGE_SLUGS[category]
        return f"{base_url}minecraft-{_slugify(base)}-{stage}-{_stage_number(suffix)}"

    return _placeholder(identifier)


def is_article_url(value: str) -> bool:
    """Check whether build_article_url produced a usable URL."""
    return not value.startswith(UNRECOGNIZED_PREFIX)
