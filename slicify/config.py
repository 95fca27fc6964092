"""Configuration for Slicify SDK."""

import os
from typing import Optional

DEFAULT_SERVICE_URL = "https://secure.slicify.com/Service/BookingService.asmx"


class Config:
    """Configuration class for Slicify SDK.

    Holds the account credentials and timing settings. Instances are not
    mutated after construction; use the ``with_*`` helpers to derive a copy.
    """

    def __init__(self, data: dict):
        defaults = {
            "serviceUrl": DEFAULT_SERVICE_URL,
            "username": "",
            "password": "",
            "callTimeoutMs": 30000,
            "pollIntervalMs": 10000,
            "pollBackoffMultiplier": 1.0,
            "maxPollIntervalMs": 10000,
            "waitTimeoutMs": None,
        }
        defaults.update(data)
        self._data = defaults

    @classmethod
    def for_service(cls, data: dict) -> "Config":
        """Create configuration for the booking service."""
        # Validation
        if not data.get("username") or not str(data.get("username", "")).strip():
            raise ValueError("username is required")
        if not data.get("password") or not str(data.get("password", "")).strip():
            raise ValueError("password is required")
        if "serviceUrl" in data and not str(data["serviceUrl"] or "").strip():
            raise ValueError("serviceUrl must not be empty")
        if "callTimeoutMs" in data and data["callTimeoutMs"] < 1000:
            raise ValueError("callTimeoutMs must be at least 1000ms")
        if "pollIntervalMs" in data and data["pollIntervalMs"] < 1000:
            raise ValueError("pollIntervalMs must be at least 1000ms")
        if "maxPollIntervalMs" in data and data["maxPollIntervalMs"] < 1000:
            raise ValueError("maxPollIntervalMs must be at least 1000ms")
        if data.get("waitTimeoutMs") is not None and data["waitTimeoutMs"] < 1000:
            raise ValueError("waitTimeoutMs must be at least 1000ms")
        if "pollBackoffMultiplier" in data and data["pollBackoffMultiplier"] < 1:
            raise ValueError("pollBackoffMultiplier must be at least 1")
        effective = cls(data)
        backoff = effective.get("pollBackoffMultiplier") > 1
        if backoff and effective.get("maxPollIntervalMs") <= effective.get("pollIntervalMs"):
            raise ValueError("maxPollIntervalMs must exceed pollIntervalMs when backoff is enabled")
        return effective

    @classmethod
    def from_env(cls, overrides: Optional[dict] = None) -> "Config":
        """Create configuration from SLICIFY_* environment variables."""
        data = {
            "username": os.getenv("SLICIFY_USERNAME", ""),
            "password": os.getenv("SLICIFY_PASSWORD", ""),
        }
        service_url = os.getenv("SLICIFY_SERVICE_URL")
        if service_url:
            data["serviceUrl"] = service_url
        data.update(overrides or {})
        return cls.for_service(data)

    def get(self, key: str, default=None):
        """Get configuration value."""
        return self._data.get(key, default)

    def with_credentials(self, username: str, password: str) -> "Config":
        """Create a new config with different credentials."""
        new_data = self._data.copy()
        new_data["username"] = username
        new_data["password"] = password
        return Config.for_service(new_data)

    def with_timing(self, **timing) -> "Config":
        """Create a new config with updated timing settings (e.g. pollIntervalMs=5000)."""
        new_data = self._data.copy()
        new_data.update(timing)
        return Config.for_service(new_data)

    def __repr__(self) -> str:
        return f"Config(serviceUrl={self.get('serviceUrl')!r}, username={self.get('username')!r})"
