"""Main client for Slicify SDK."""

from typing import Optional

from .config import Config
from .clients.booking import BookingClient
from .transport.https import HttpsTransport
from .transport.interface import TransportInterface


class SlicifyClient:
    """Main client for Slicify SDK."""

    def __init__(self, config: Config, transport: Optional[TransportInterface] = None):
        self.config = config
        self.transport: TransportInterface = transport or HttpsTransport(config)
        self.booking = BookingClient(self.transport, self.config)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - cleanup resources."""
        await self.aclose()

    async def aclose(self):
        """Manually close the client and cleanup resources."""
        await self.transport.aclose()

    def get_booking(self) -> BookingClient:
        """Get booking client."""
        return self.booking

    def get_transport(self) -> TransportInterface:
        """Get transport instance."""
        return self.transport
