"""Client modules for Slicify SDK."""

from .booking import BookingClient

__all__ = ["BookingClient"]
