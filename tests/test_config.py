"""Tests for configuration loading."""

from pathlib import Path

import pytest

from release_monitor.config import ConfigError, get_settings
from release_monitor.core import DEFAULT_MESSAGE_TEMPLATE, ReleaseCategory


def test_defaults_without_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test defaults are used when config file is missing."""
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    
    settings = get_settings(tmp_path / "missing.yaml")
    
    assert settings.interval == 60
    assert settings.recipients == []
    assert settings.delivery.backend == "console"
    assert settings.notifications.message_template == DEFAULT_MESSAGE_TEMPLATE
    assert all(settings.notifications.category_filters().values())
    assert settings.proxy_url is None


def test_yaml_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test YAML sections override defaults."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:ABC")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "monitor:\n"
        "  interval: 120\n"
        "notifications:\n"
        "  snapshot: false\n"
        "  message_template: '{version} is out: {url}'\n"
        "delivery:\n"
        "  backend: telegram\n"
        "  recipients: [-1001234567890, '42']\n"
        "proxy:\n"
        "  enabled: true\n"
        "  url: http://proxy.local:8080\n",
        encoding="utf-8",
    )
    
    settings = get_settings(config_path)
    
    assert settings.interval == 120
    assert settings.telegram_bot_token == "123:ABC"
    assert settings.recipients == ["-1001234567890", "42"]
    assert settings.notifications.category_filters()[ReleaseCategory.SNAPSHOT] is False
    assert settings.notifications.category_filters()[ReleaseCategory.RELEASE] is True
    assert settings.notifications.message_template == "{version} is out: {url}"
    assert settings.proxy_url == "http://proxy.local:8080"


def test_empty_template_falls_back_to_default(tmp_path: Path) -> None:
    """Test blank template is replaced by the default."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("notifications:\n  message_template: ''\n", encoding="utf-8")
    
    settings = get_settings(config_path)
    
    assert settings.notifications.message_template == DEFAULT_MESSAGE_TEMPLATE


@pytest.mark.parametrize(
    "content, message",
    [
        ("monitor:\n  interval: 0\n", "interval"),
        ("delivery:\n  backend: carrier-pigeon\n", "backend"),
        ("monitor:\n  intervall: 30\n", "Unknown setting 'monitor.intervall'"),
        ("proxy: true\n", "must be a mapping"),
        ("monitor:\n  interval: '60'\n", "monitor.interval' must be a number"),
        ("monitor:\n  dispatch_delay: true\n", "monitor.dispatch_delay' must be a number"),
        ("notifications:\n  snapshot: 'false'\n", "notifications.snapshot' must be true or false"),
        ("notifications:\n  release: 0\n", "notifications.release' must be true or false"),
        ("notifications:\n  message_template: 42\n", "message_template' must be a string"),
        ("delivery:\n  recipients: '-100123'\n", "delivery.recipients' must be a list"),
        ("monitor: [1, 2\n", "Cannot parse"),
        ("- monitor\n", "mapping of sections"),
    ],
)
def test_invalid_config(tmp_path: Path, content: str, message: str) -> None:
    """Test invalid values are rejected at load time."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")
    
    with pytest.raises(ConfigError, match=message):
        get_settings(config_path)


def test_telegram_requires_token(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test telegram backend needs a bot token."""
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("delivery:\n  backend: telegram\n", encoding="utf-8")
    
    with pytest.raises(ConfigError, match="TELEGRAM_BOT_TOKEN"):
        get_settings(config_path)
