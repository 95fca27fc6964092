"""Tests for SlicifyClient."""

import pytest

from slicify.client import SlicifyClient
from slicify.clients.booking import BookingClient
from slicify.transport.https import HttpsTransport


class TestSlicifyClient:
    def test_defaults_to_https_transport(self, config):
        client = SlicifyClient(config)
        assert isinstance(client.get_transport(), HttpsTransport)
        assert isinstance(client.get_booking(), BookingClient)
        assert client.booking.config is config

    def test_uses_given_transport(self, config, transport):
        client = SlicifyClient(config, transport=transport)
        assert client.booking.transport is transport

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, config, transport):
        async with SlicifyClient(config, transport=transport) as client:
            assert isinstance(client, SlicifyClient)
        transport.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_aclose(self, config, transport):
        client = SlicifyClient(config, transport=transport)
        await client.aclose()
        transport.aclose.assert_awaited_once()
