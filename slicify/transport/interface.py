"""Transport interface for Slicify SDK."""

from abc import ABC, abstractmethod
from typing import Mapping, Union

ParamValue = Union[str, int, float]


class TransportInterface(ABC):
    """Interface for transport implementations."""

    @abstractmethod
    async def query(self, operation: str, params: Mapping[str, ParamValue]) -> str:
        """Run one service operation and return the raw response body."""
        pass

    async def aclose(self) -> None:
        """Release any resources held by the transport."""
