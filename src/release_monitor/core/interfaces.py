"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from release_monitor.core.entities import CatalogSnapshot


class CatalogSource(ABC):
    """Interface for fetching the version catalog."""
    
    @abstractmethod
    async def fetch_catalog(self) -> CatalogSnapshot:
        """Fetch current catalog snapshot.
        
        Raises:
            CatalogFetchError: on transport errors, timeouts or malformed data
        """
        pass


class Broadcaster(ABC):
    """Interface for delivering messages to recipients."""
    
    @abstractmethod
    async def send(self, recipient: str, message: str) -> None:
        """Deliver message to one recipient.
        
        Raises:
            DispatchError: if delivery failed
        """
        pass
