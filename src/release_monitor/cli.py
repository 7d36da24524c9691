"""CLI entry point for release monitor."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer

from release_monitor.adapters.notifications import ConsoleNotifier, SlackNotifier, TelegramNotifier
from release_monitor.adapters.sources import MojangManifestSource
from release_monitor.config import ConfigError, Settings, get_settings
from release_monitor.core import (
    Broadcaster,
    CatalogFetchError,
    NotificationComposer,
    SeenVersionsTracker,
    is_article_url,
)
from release_monitor.use_cases import LatestVersionsService, PollCycleService, format_status

app = typer.Typer(help="Watch the Minecraft version manifest and announce new versions.")

CONFIG_OPTION = typer.Option(Path("config.yaml"), "--config", "-c", help="Path to YAML config")


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _load_settings(config_path: Path) -> Settings:
    try:
        return get_settings(config_path)
    except ConfigError as e:
        print(f"❌ Configuration error: {e}")
        raise typer.Exit(code=2)


def build_source(settings: Settings) -> MojangManifestSource:
    return MojangManifestSource(
        manifest_url=settings.monitor.manifest_url,
        timeout=settings.monitor.fetch_timeout,
        proxy_url=settings.proxy_url,
    )


def build_broadcaster(settings: Settings) -> Broadcaster:
    """Create notifier for the configured delivery backend."""
    backend = settings.delivery.backend
    if backend == "telegram":
        return TelegramNotifier(settings.telegram_bot_token or "")
    if backend == "slack":
        return SlackNotifier()
    return ConsoleNotifier()


def build_poll_service(settings: Settings, tracker: SeenVersionsTracker) -> PollCycleService:
    return PollCycleService(
        source=build_source(settings),
        broadcaster=build_broadcaster(settings),
        tracker=tracker,
        composer=NotificationComposer(settings.notifications.message_template),
        recipients=settings.recipients,
        category_filters=settings.notifications.category_filters(),
        dispatch_delay=settings.monitor.dispatch_delay,
        locale=settings.monitor.article_locale,
    )


def _status_text(settings: Settings, known_versions: Optional[int] = None) -> str:
    return format_status(
        interval=settings.interval,
        recipients=settings.recipients,
        category_filters=settings.notifications.category_filters(),
        template=settings.notifications.message_template,
        proxy_url=settings.proxy_url,
        known_versions=known_versions,
    )


async def async_run(settings: Settings, once: bool) -> None:
    """Async implementation of run command."""
    tracker = SeenVersionsTracker()
    service = build_poll_service(settings, tracker)

    report = await service.run_guarded()
    if report is not None and report.fetched:
        print(_status_text(settings, len(tracker)))
    if once:
        return

    await asyncio.sleep(settings.interval)
    await service.run_forever(settings.interval)


@app.command()
def run(
    config: Path = CONFIG_OPTION,
    debug: bool = typer.Option(False, "--debug", help="Verbose logging"),
    once: bool = typer.Option(False, "--once", help="Run a single check and exit"),
) -> None:
    """Start polling the version manifest."""
    _setup_logging(debug)
    settings = _load_settings(config)

    print("\n" + "=" * 70)
    print("⛏️  RELEASE MONITOR - Minecraft versions")
    print("=" * 70)
    print(f"  • Backend: {settings.delivery.backend}")
    print(f"  • Recipients: {len(settings.recipients)}")
    print(f"  • Interval: {settings.interval:g} s")
    if not settings.recipients:
        print("  ⚠️  No recipients configured (notifications will go nowhere)")
    print()

    try:
        asyncio.run(async_run(settings, once))
    except KeyboardInterrupt:
        print("\n👋 Stopped")


@app.command()
def check(config: Path = CONFIG_OPTION) -> None:
    """Show the latest release and snapshot with article links."""
    _setup_logging(False)
    settings = _load_settings(config)
    service = LatestVersionsService(build_source(settings), settings.monitor.article_locale)

    try:
        latest = asyncio.run(service.latest())
    except CatalogFetchError as e:
        print(f"❌ Check failed, try again later: {e}")
        raise typer.Exit(code=1)

    print("Current latest versions:")
    for label, entry, url in latest:
        print(f"{label}: {entry.identifier}")
        print(f"Article: {url if is_article_url(url) else 'no article link'}")


@app.command()
def status(config: Path = CONFIG_OPTION) -> None:
    """Show monitor configuration."""
    settings = _load_settings(config)
    print(_status_text(settings))


if __name__ == "__main__":
    app()
