"""Data Transfer Objects for Slicify SDK."""

import math
from numbers import Real
from typing import Any, Dict, Optional, Union

from .exceptions import InvalidArgumentException

MAX_CORES = 64
MAX_RAM_MB = 256 * 1024
MAX_PRICE = 2.0
SUPPORTED_BITS = (32, 64)


def require_int(name: str, value: Any) -> int:
    """Reject anything but a plain int (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentException(f"{name} must be an integer, got {value!r}")
    return value


class NodeRequirements:
    """Constraints for the machine to book."""

    def __init__(
        self,
        min_cores: int,
        min_ram: int,
        max_price: float,
        bits: int,
        min_ecu: int,
    ):
        self.min_cores = min_cores
        self.min_ram = min_ram
        self.max_price = max_price
        self.bits = bits
        self.min_ecu = min_ecu

    @classmethod
    def make(
        cls,
        min_cores: int,
        min_ram: int,
        max_price: float,
        bits: int,
        min_ecu: int,
    ) -> "NodeRequirements":
        """Create validated node requirements."""
        # Validation
        for name, value in (
            ("min_cores", min_cores),
            ("min_ram", min_ram),
            ("bits", bits),
            ("min_ecu", min_ecu),
        ):
            require_int(name, value)
        if (
            isinstance(max_price, bool)
            or not isinstance(max_price, Real)
            or not math.isfinite(max_price)
        ):
            raise InvalidArgumentException(f"max_price must be a finite number, got {max_price!r}")
        if min_cores < 1 or min_cores > MAX_CORES:
            raise InvalidArgumentException(f"min_cores must be between 1 and {MAX_CORES}")
        if min_ram < 0 or min_ram > MAX_RAM_MB:
            raise InvalidArgumentException(f"min_ram must be between 0 and {MAX_RAM_MB} (MB)")
        if max_price < 0 or max_price > MAX_PRICE:
            raise InvalidArgumentException(
                f"max_price must be between 0 and {MAX_PRICE} ($/hour)"
            )
        if bits not in SUPPORTED_BITS:
            raise InvalidArgumentException("bits must be either 32 or 64")
        if min_ecu < 1:
            raise InvalidArgumentException("min_ecu must be at least 1")

        return cls(min_cores, min_ram, float(max_price), bits, min_ecu)

    def to_params(self) -> Dict[str, Union[int, float]]:
        """Convert to BookMachine query parameters, in wire order."""
        return {
            "minCores": self.min_cores,
            "minRam": self.min_ram,
            "maxPrice": self.max_price,
            "bits": self.bits,
            "minECU": self.min_ecu,
        }

    def __repr__(self) -> str:
        return (
            f"NodeRequirements(min_cores={self.min_cores}, min_ram={self.min_ram}, "
            f"max_price={self.max_price}, bits={self.bits}, min_ecu={self.min_ecu})"
        )


class BookingDetails:
    """Snapshot of everything the service reports about one booking."""

    def __init__(
        self,
        booking_id: int,
        status: str,
        ssh_password: Optional[str] = None,
        sudo_password: Optional[str] = None,
        machine_spec: Optional[str] = None,
        core_count: Optional[int] = None,
        ecu: Optional[int] = None,
    ):
        self.booking_id = booking_id
        self.status = status
        self.ssh_password = ssh_password
        self.sudo_password = sudo_password
        self.machine_spec = machine_spec
        self.core_count = core_count
        self.ecu = ecu

    @property
    def is_ready(self) -> bool:
        """True once the machine can be used."""
        return self.status == "Ready"

    def to_dict(self) -> Dict[str, Optional[Union[int, str]]]:
        """Convert to a plain dictionary."""
        return {
            "booking_id": self.booking_id,
            "status": self.status,
            "ssh_password": self.ssh_password,
            "sudo_password": self.sudo_password,
            "machine_spec": self.machine_spec,
            "core_count": self.core_count,
            "ecu": self.ecu,
        }

    def __repr__(self) -> str:
        # Passwords omitted.
        return (
            f"BookingDetails(booking_id={self.booking_id}, status={self.status!r}, "
            f"core_count={self.core_count}, ecu={self.ecu})"
        )
