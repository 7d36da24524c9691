"""Console notification adapter for dry runs."""

from release_monitor.core import Broadcaster


class ConsoleNotifier(Broadcaster):
    """Print notifications instead of delivering them."""

    async def send(self, recipient: str, message: str) -> None:
        print(f"📨 → {recipient}\n{message}\n")
