"""Source adapters for fetching the version catalog."""

from release_monitor.adapters.sources.mojang_manifest_source import (
    MojangManifestSource,
    parse_manifest,
)

__all__ = ["MojangManifestSource", "parse_manifest"]
