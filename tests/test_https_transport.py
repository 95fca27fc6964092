"""Tests for HttpsTransport."""

import base64

import httpx
import pytest

from slicify.config import Config
from slicify.exceptions import TransportException
from slicify.transport.https import HttpsTransport

from tests.replies import xml_value


def make_transport(handler, **config):
    data = {"username": "alice", "password": "s3cret"}
    data.update(config)
    return HttpsTransport(Config.for_service(data), http_transport=httpx.MockTransport(handler))


class TestQuery:
    @pytest.mark.asyncio
    async def test_builds_operation_url(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text=xml_value(99, tag="int"))

        transport = make_transport(handler)
        body = await transport.query("BookMachine", {"minCores": 4, "maxPrice": 0.5})
        await transport.aclose()

        assert body == xml_value(99, tag="int")
        request = seen[0]
        assert request.method == "GET"
        assert request.url.host == "secure.slicify.com"
        assert request.url.path == "/Service/BookingService.asmx/BookMachine"
        assert request.url.query == b"minCores=4&maxPrice=0.5"

    @pytest.mark.asyncio
    async def test_sends_basic_auth(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text=xml_value("Ready"))

        transport = make_transport(handler)
        await transport.query("GetBookingStatus", {"bookingID": 1})
        await transport.aclose()

        expected = base64.b64encode(b"alice:s3cret").decode()
        assert seen[0].headers["Authorization"] == f"Basic {expected}"

    @pytest.mark.asyncio
    async def test_no_params(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="<ArrayOfInt />")

        transport = make_transport(handler)
        await transport.query("GetActiveBookingIDs", {})
        await transport.aclose()

        assert seen[0].url.path.endswith("/GetActiveBookingIDs")
        assert seen[0].url.query == b""

    @pytest.mark.asyncio
    async def test_custom_service_url(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text=xml_value("x"))

        transport = make_transport(handler, serviceUrl="https://example.test/api/Booking.asmx/")
        await transport.query("GetMachineSpec", {"bookingID": 3})
        await transport.aclose()

        assert str(seen[0].url) == "https://example.test/api/Booking.asmx/GetMachineSpec?bookingID=3"

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        def handler(request):
            return httpx.Response(500, text="Server was unable to process request.")

        transport = make_transport(handler)
        with pytest.raises(TransportException) as exc_info:
            await transport.query("GetECU", {"bookingID": 1})
        await transport.aclose()

        assert exc_info.value.status_code == 500
        assert "unable to process" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport = make_transport(handler)
        with pytest.raises(TransportException) as exc_info:
            await transport.query("GetECU", {"bookingID": 1})
        await transport.aclose()

        assert exc_info.value.status_code is None
        assert exc_info.value.code == "ConnectError"


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self):
        transport = make_transport(lambda request: httpx.Response(200, text="<a/>"))
        async with transport:
            pass
        assert transport._client.is_closed

    def test_timeout_from_config(self):
        transport = make_transport(
            lambda request: httpx.Response(200, text="<a/>"), callTimeoutMs=5000
        )
        assert transport.timeout == 5.0
