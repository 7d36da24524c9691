"""Configuration management."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from release_monitor.core import DEFAULT_MESSAGE_TEMPLATE, ReleaseCategory, ReleaseMonitorError

MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"
DELIVERY_BACKENDS = ("telegram", "slack", "console")


class ConfigError(ReleaseMonitorError):
    """Invalid configuration."""


@dataclass
class MonitorConfig:
    """Polling settings."""
    interval: float = 60.0
    dispatch_delay: float = 1.0
    fetch_timeout: float = 10.0
    manifest_url: str = MANIFEST_URL
    article_locale: str = "en-us"


@dataclass
class NotificationsConfig:
    """Per-category toggles and message template."""
    release: bool = True
    snapshot: bool = True
    pre_release: bool = True
    release_candidate: bool = True
    message_template: str = DEFAULT_MESSAGE_TEMPLATE

    def category_filters(self) -> dict[ReleaseCategory, bool]:
        return {
            ReleaseCategory.RELEASE: self.release,
            ReleaseCategory.SNAPSHOT: self.snapshot,
            ReleaseCategory.PRE_RELEASE: self.pre_release,
            ReleaseCategory.RELEASE_CANDIDATE: self.release_candidate,
        }


@dataclass
class DeliveryConfig:
    """Where notifications go."""
    backend: str = "console"
    recipients: list[str] = field(default_factory=list)


@dataclass
class ProxyConfig:
    """HTTP proxy for catalog fetches."""
    enabled: bool = False
    url: str = "http://127.0.0.1:7890"


@dataclass
class Settings:
    """Application settings."""

    # Secrets (from environment only)
    telegram_bot_token: Optional[str] = None

    # Config sections
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    delivery: DeliveryConfig = field(default_factory=DeliveryConfig)
    proxy: ProxyConfig = field(default_factory=ProxyConfig)

    @property
    def interval(self) -> float:
        return self.monitor.interval

    @property
    def recipients(self) -> list[str]:
        return self.delivery.recipients

    @property
    def proxy_url(self) -> Optional[str]:
        """Proxy URL if proxying is enabled."""
        if self.proxy.enabled and self.proxy.url:
            return self.proxy.url
        return None

    def validate(self) -> None:
        """Raise ConfigError for values the monitor cannot run with."""
        if self.monitor.interval <= 0:
            raise ConfigError("monitor.interval must be positive")
        if self.monitor.dispatch_delay < 0:
            raise ConfigError("monitor.dispatch_delay cannot be negative")
        if self.monitor.fetch_timeout <= 0:
            raise ConfigError("monitor.fetch_timeout must be positive")
        if self.delivery.backend not in DELIVERY_BACKENDS:
            raise ConfigError(
                f"delivery.backend must be one of {', '.join(DELIVERY_BACKENDS)}, "
                f"got {self.delivery.backend!r}"
            )
        if self.delivery.backend == "telegram" and not self.telegram_bot_token:
            raise ConfigError("TELEGRAM_BOT_TOKEN is required for telegram delivery")


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse {config_path}: {e}") from e


def _coerce(setting: str, expected: Any, value: Any) -> Any:
    """Check YAML value against the dataclass field type."""
    if expected is bool:
        if isinstance(value, bool):
            return value
        kind = "true or false"
    elif expected is float:
        # bool is an int subclass, so exclude it explicitly
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        kind = "a number"
    elif expected is str:
        if isinstance(value, str):
            return value
        kind = "a string"
    else:
        # list[str]: chat ids may be written as numbers in YAML
        if isinstance(value, list) and all(
            isinstance(item, (str, int)) and not isinstance(item, bool) for item in value
        ):
            return [str(item) for item in value]
        kind = "a list of strings"

    raise ConfigError(f"Setting '{setting}' must be {kind}, got {value!r}")


def _apply_section(section: Any, name: str, values: Any) -> None:
    if not isinstance(values, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")

    known = {f.name: f.type for f in fields(section)}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"Unknown setting '{name}.{key}'")
        setattr(section, key, _coerce(f"{name}.{key}", known[key], value))


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    if not isinstance(config, dict):
        raise ConfigError(f"{config_path} must contain a mapping of sections")

    settings = Settings(
        telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN"),
    )

    for name in ("monitor", "notifications", "delivery", "proxy"):
        if name in config:
            _apply_section(getattr(settings, name), name, config[name])

    if not settings.notifications.message_template:
        settings.notifications.message_template = DEFAULT_MESSAGE_TEMPLATE

    settings.validate()
    return settings
