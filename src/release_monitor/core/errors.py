"""Core exceptions."""


class ReleaseMonitorError(Exception):
    """Base error for release monitor."""


class CatalogFetchError(ReleaseMonitorError):
    """Catalog could not be fetched or parsed."""


class DispatchError(ReleaseMonitorError):
    """Message could not be delivered to a recipient."""
    
    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__(f"{recipient}: {reason}")
        self.recipient = recipient
        self.reason = reason
