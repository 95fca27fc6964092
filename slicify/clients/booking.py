"""Booking client."""

import asyncio
import logging
from time import monotonic
from typing import List, Optional

from ..config import Config
from ..dto import BookingDetails, NodeRequirements, require_int
from ..exceptions import (
    BookingClosedException,
    BookingTimeoutException,
    InvalidArgumentException,
    SlicifyException,
)
from ..reply import parse_int, parse_int_list, parse_scalar
from ..transport.interface import TransportInterface

logger = logging.getLogger(__name__)

STATUS_UNKNOWN = "Unknown"
STATUS_READY = "Ready"
STATUS_CLOSED = "Closed"


class BookingClient:
    """Client for booking operations.

    Every method issues one request to the booking service, except
    ``get_booking_details`` and ``wait_ready`` which issue several in turn.
    """

    def __init__(self, transport: TransportInterface, config: Config):
        self.transport = transport
        self.config = config

    async def book_node(
        self,
        min_cores: int,
        min_ram: int,
        max_price: float,
        bits: int,
        min_ecu: int,
    ) -> int:
        """Book a machine matching the given constraints.

        If a machine is available it is booked immediately and the booking
        ID is returned.
        """
        requirements = NodeRequirements.make(min_cores, min_ram, max_price, bits, min_ecu)
        return await self.book(requirements)

    async def book(self, requirements: NodeRequirements) -> int:
        """Book a machine from prebuilt requirements."""
        body = await self.transport.query("BookMachine", requirements.to_params())
        booking_id = parse_int(parse_scalar(body), body)
        logger.info("Booked node %s as booking %d", requirements, booking_id)
        return booking_id

    async def get_active_booking_ids(self) -> List[int]:
        """Return the IDs of all bookings currently active for this account."""
        body = await self.transport.query("GetActiveBookingIDs", {})
        return parse_int_list(body, "int")

    async def get_booking_status(self, booking_id: int) -> str:
        """Get the booking status. It is "Ready" once the machine can be used."""
        return await self._run_booking_operation("GetBookingStatus", booking_id)

    async def get_booking_password(self, booking_id: int) -> str:
        """Get the SSH login password for the machine."""
        return await self._run_booking_operation("GetBookingPassword", booking_id)

    async def get_sudo_password(self, booking_id: int) -> str:
        """Get the sudo/root password for the machine."""
        return await self._run_booking_operation("GetSudoPassword", booking_id)

    async def get_machine_spec(self, booking_id: int) -> str:
        """Get a textual description of the hardware the machine runs on."""
        return await self._run_booking_operation("GetMachineSpec", booking_id)

    async def get_core_count(self, booking_id: int) -> int:
        """Get the number of hardware cores assigned to the machine."""
        cores = await self._run_booking_operation("GetCoreCount", booking_id)
        return parse_int(cores)

    async def get_ecu(self, booking_id: int) -> int:
        """Get the approximate ECU benchmark of the machine."""
        ecu = await self._run_booking_operation("GetECU", booking_id)
        return parse_int(ecu)

    async def get_close_reason(self, booking_id: int) -> str:
        """Get a textual description of why the booking was closed."""
        return await self._run_booking_operation("GetCloseReason", booking_id)

    async def cancel_booking(self, booking_id: int) -> None:
        """Cancel the booking.

        The reply is not read: only transport failures are reported.
        """
        await self._run_booking_operation("CancelBooking", booking_id, expect_result=False)
        logger.info("Cancelled booking %d", booking_id)

    async def get_booking_details(self, booking_id: int) -> BookingDetails:
        """Collect status, passwords and hardware details of a booking."""
        return BookingDetails(
            booking_id=booking_id,
            status=await self.get_booking_status(booking_id),
            ssh_password=await self.get_booking_password(booking_id),
            sudo_password=await self.get_sudo_password(booking_id),
            machine_spec=await self.get_machine_spec(booking_id),
            core_count=await self.get_core_count(booking_id),
            ecu=await self.get_ecu(booking_id),
        )

    async def wait_ready(self, booking_id: int, timeout: Optional[float] = None) -> None:
        """Wait until the booking is in "Ready" status.

        The status is polled every ``pollIntervalMs``; with a
        ``pollBackoffMultiplier`` above 1 the interval grows after each poll
        up to ``maxPollIntervalMs``. ``timeout`` (seconds) defaults to
        ``waitTimeoutMs``; when neither is set the wait is unbounded. The
        wait can always be interrupted by cancelling the awaiting task.

        Raises:
            BookingClosedException: the booking was closed instead.
            BookingTimeoutException: the timeout elapsed first.
        """
        self._check_booking_id(booking_id)
        if timeout is None and self.config.get("waitTimeoutMs") is not None:
            timeout = self.config.get("waitTimeoutMs") / 1000

        interval = self.config.get("pollIntervalMs", 10000) / 1000
        max_interval = max(self.config.get("maxPollIntervalMs", 10000) / 1000, interval)
        multiplier = self.config.get("pollBackoffMultiplier", 1.0)
        deadline = monotonic() + timeout if timeout is not None else None

        status = STATUS_UNKNOWN
        while status != STATUS_READY:
            if status == STATUS_CLOSED:
                raise BookingClosedException(
                    booking_id, await self._close_reason(booking_id, deadline)
                )

            wait = interval
            if deadline is not None:
                remaining = deadline - monotonic()
                if remaining <= 0:
                    raise BookingTimeoutException(booking_id, timeout, status)
                wait = min(wait, remaining)

            await asyncio.sleep(wait)
            status = await self.get_booking_status(booking_id)
            logger.debug("Booking %d status: %s", booking_id, status)
            interval = min(interval * multiplier, max_interval)

        logger.info("Booking %d is ready", booking_id)

    async def _close_reason(self, booking_id: int, deadline: Optional[float]) -> Optional[str]:
        logger.warning("Booking %d was closed while waiting for it", booking_id)
        remaining = None
        if deadline is not None:
            remaining = deadline - monotonic()
            if remaining <= 0:
                return None
        try:
            reason = await asyncio.wait_for(self.get_close_reason(booking_id), remaining)
            return reason or None
        except (SlicifyException, asyncio.TimeoutError) as e:
            logger.debug("Could not fetch close reason for booking %d: %s", booking_id, e)
            return None

    async def _run_booking_operation(
        self, operation: str, booking_id: int, expect_result: bool = True
    ) -> Optional[str]:
        self._check_booking_id(booking_id)
        body = await self.transport.query(operation, {"bookingID": booking_id})
        if not expect_result:
            return None
        return parse_scalar(body)

    @staticmethod
    def _check_booking_id(booking_id: int) -> None:
        require_int("booking_id", booking_id)
        if booking_id < 0:
            raise InvalidArgumentException("booking_id must not be negative")
