"""Exceptions for Slicify SDK."""

from typing import Optional


class SlicifyException(Exception):
    """Base exception for all Slicify SDK errors."""


class InvalidArgumentException(SlicifyException, ValueError):
    """Raised before any network access when an argument is out of range."""


class TransportException(SlicifyException):
    """Exception raised for transport errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code

    @classmethod
    def from_http(cls, error: Exception) -> "TransportException":
        """Create exception from HTTP error."""
        status_code = None
        code = type(error).__name__
        message = str(error) or code

        # Handle httpx HTTPStatusError
        response = getattr(error, "response", None)
        if response is not None:
            status_code = response.status_code
            text = response.text.strip()
            message = f"HTTP {status_code}: {text}" if text else f"HTTP {status_code}"

        return cls(message, status_code, code)


class ResponseParseException(SlicifyException):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class BookingClosedException(SlicifyException):
    """Raised when a booking is closed while waiting for it to become ready."""

    def __init__(self, booking_id: int, reason: Optional[str] = None):
        message = f"Booking {booking_id} was closed before it became ready"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.booking_id = booking_id
        self.reason = reason


class BookingTimeoutException(SlicifyException):
    """Raised when a booking does not become ready within the wait timeout."""

    def __init__(self, booking_id: int, timeout: float, last_status: str):
        super().__init__(
            f"Booking {booking_id} not ready after {timeout:g}s (last status: {last_status})"
        )
        self.booking_id = booking_id
        self.timeout = timeout
        self.last_status = last_status
