"""Transport abstraction used by the dispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import WireRequest, WireResponse

REQUEST_HEADERS = {
    "Content-Type": "application/json;charset=UTF-8",
    "Accept": "application/json",
}


class Transport(ABC):
    """Interface for sending a single request to the automation server."""

    @abstractmethod
    def send(self, request: WireRequest) -> WireResponse:
        """Perform ``request`` and return the raw response.

        Implementations must raise :class:`~webdriver_wire.errors.TransportError`
        for any I/O failure and must not retry.
        """

    def close(self) -> None:
        """Release any resources held by the transport."""

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
