"""Release monitor: notify about new Minecraft versions."""

__version__ = "0.1.0"
