"""Telegram Bot API notification adapter."""

import httpx

from release_monitor.core import Broadcaster, DispatchError


class TelegramNotifier(Broadcaster):
    """Send notifications to Telegram chats via the Bot API.

    Each recipient is a chat id (groups use negative ids).
    """

    def __init__(self, bot_token: str, timeout: float = 10.0) -> None:
        self._bot_token = bot_token
        self.timeout = timeout

    def _endpoint(self) -> str:
        return f"https://api.telegram.org/bot{self._bot_token}/sendMessage"

    async def send(self, recipient: str, message: str) -> None:
        """Send plain-text message to one chat."""
        payload = {
            "chat_id": recipient,
            "text": message,
            "disable_web_page_preview": False,
        }

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(self._endpoint(), json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise DispatchError(
                    recipient, f"Bot API error {e.response.status_code}: {e.response.text}"
                ) from e
            except httpx.HTTPError as e:
                raise DispatchError(recipient, str(e)) from e
