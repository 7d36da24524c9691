"""Slack notification adapter."""

import httpx

from release_monitor.core import Broadcaster, DispatchError


class SlackNotifier(Broadcaster):
    """Send notifications to Slack via incoming webhooks.
    
    Each recipient is a webhook URL.
    """
    
    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout
    
    async def send(self, recipient: str, message: str) -> None:
        """Post message to a Slack webhook.
        
        Args:
            recipient: Incoming webhook URL
            message: Rendered notification text
        """
        payload = {
            "text": message,
            "mrkdwn": True,
        }
        
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(recipient, json=payload)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise DispatchError(recipient, str(e)) from e
