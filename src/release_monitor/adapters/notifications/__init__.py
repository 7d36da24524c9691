"""Notification adapters."""

from release_monitor.adapters.notifications.console_notifier import ConsoleNotifier
from release_monitor.adapters.notifications.slack_notifier import SlackNotifier
from release_monitor.adapters.notifications.telegram_notifier import TelegramNotifier

__all__ = ["ConsoleNotifier", "SlackNotifier", "TelegramNotifier"]
