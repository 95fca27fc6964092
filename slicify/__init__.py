"""Slicify Python SDK for the compute-node booking service."""

from .client import SlicifyClient
from .clients.booking import BookingClient
from .config import Config
from .dto import BookingDetails, NodeRequirements
from .exceptions import (
    BookingClosedException,
    BookingTimeoutException,
    InvalidArgumentException,
    ResponseParseException,
    SlicifyException,
    TransportException,
)

__version__ = "1.0.0"
__all__ = [
    "SlicifyClient",
    "BookingClient",
    "Config",
    "NodeRequirements",
    "BookingDetails",
    "SlicifyException",
    "InvalidArgumentException",
    "TransportException",
    "ResponseParseException",
    "BookingClosedException",
    "BookingTimeoutException",
]
