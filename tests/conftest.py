"""Shared fixtures for Slicify SDK tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from slicify.clients.booking import BookingClient
from slicify.config import Config
from slicify.transport.interface import TransportInterface

from tests.replies import xml_value


@pytest.fixture
def config():
    return Config.for_service({"username": "alice", "password": "s3cret"})


@pytest.fixture
def transport():
    """Mock transport; set ``transport.query.return_value`` or ``side_effect``."""
    mock = MagicMock(spec=TransportInterface)
    mock.query = AsyncMock(return_value=xml_value(""))
    mock.aclose = AsyncMock()
    return mock


@pytest.fixture
def booking(transport, config):
    return BookingClient(transport, config)
