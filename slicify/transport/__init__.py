"""Transport layer for Slicify SDK."""

from .interface import TransportInterface
from .https import HttpsTransport
from .query import build_query

__all__ = ["TransportInterface", "HttpsTransport", "build_query"]
