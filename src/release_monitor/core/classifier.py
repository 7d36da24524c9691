"""Release category detection from version identifiers."""

import re

from release_monitor.core.entities import ReleaseCategory

# Year-week snapshot codes, e.g. 24w10a
SNAPSHOT_PATTERN = re.compile(r"\d+w\d+[a-z]", re.ASCII)
# Dotted numeric versions, e.g. 1.21 or 1.21.2
RELEASE_PATTERN = re.compile(r"\d+\.\d+(\.\d+)?", re.ASCII)


def classify_identifier(identifier: str) -> ReleaseCategory:
    """
    Infer release category from the shape of a version identifier.

    Rules are checked in order and the first match wins, so substring
    markers take priority over the numeric shapes.

    Args:
        identifier: Version identifier as published in the catalog

    Returns:
        Detected category, UNKNOWN if nothing matches
    """
    value = identifier.lower()

    if "pre" in value:
        return ReleaseCategory.PRE_RELEASE
    if "rc" in value:
        return ReleaseCategory.RELEASE_CANDIDATE
    if SNAPSHOT_PATTERN.fullmatch(value):
        return ReleaseCategory.SNAPSHOT
    if RELEASE_PATTERN.fullmatch(value):
        return ReleaseCategory.RELEASE

    return ReleaseCategory.UNKNOWN
