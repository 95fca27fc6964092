"""HTTPS transport implementation."""

import logging
from typing import Mapping, Optional

import httpx

from ..config import Config
from ..exceptions import TransportException
from .interface import ParamValue, TransportInterface
from .query import build_query

logger = logging.getLogger(__name__)


class HttpsTransport(TransportInterface):
    """HTTPS transport for the Slicify booking web service.

    Each operation is a GET on ``{serviceUrl}/{operation}`` with the
    parameters in the query string and the account credentials sent as
    HTTP Basic authentication.
    """

    def __init__(
        self, config: Config, http_transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config
        self.service_url = config.get("serviceUrl").rstrip("/")
        self.timeout = config.get("callTimeoutMs", 30000) / 1000
        # Create a persistent httpx client for connection pooling
        self._client = httpx.AsyncClient(
            base_url=self.service_url,
            auth=(config.get("username"), config.get("password")),
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            transport=http_transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _headers(self) -> dict:
        """Build request headers."""
        return {
            "Accept": "text/xml, application/xml",
        }

    async def query(self, operation: str, params: Mapping[str, ParamValue]) -> str:
        """Run one service operation and return the raw response body."""
        query = build_query(params)
        url = f"/{operation}?{query}" if query else f"/{operation}"
        logger.debug("Slicify request %s (%d params)", operation, len(params))
        try:
            response = await self._client.get(url, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.debug("Slicify request %s failed: %s", operation, e)
            raise TransportException.from_http(e) from e
        return response.text
