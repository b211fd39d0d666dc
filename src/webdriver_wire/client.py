"""Entry point resource for a remote WebDriver server."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .commands.catalog import ROOT_COMMANDS
from .dispatcher import Dispatcher
from .errors import MalformedResponse
from .models import DEFAULT_BASE_URL, Capability
from .resources.base import ResourceNode
from .resources.session import Session
from .transport.base import Transport

LOGGER = logging.getLogger(__name__)


class WebDriver(ResourceNode):
    """The server root (``/wd/hub``): status, session listing and creation."""

    commands = ROOT_COMMANDS

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        dispatcher: Optional[Dispatcher] = None,
        *,
        transport: Optional[Transport] = None,
    ) -> None:
        if dispatcher is None:
            if transport is None:
                from .transport.http import HttpxTransport

                transport = HttpxTransport()
            dispatcher = Dispatcher(transport)
        super().__init__(base_url, dispatcher)

    def close(self) -> None:
        """Close the underlying transport."""

        self._dispatcher.transport.close()

    def __enter__(self) -> "WebDriver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def session(
        self,
        browser: str = "firefox",
        desired_capabilities: Optional[dict[str, Any]] = None,
        required_capabilities: Optional[dict[str, Any]] = None,
    ) -> Session:
        """Create a new session and return it.

        The session id is taken from the envelope's ``sessionId`` or, for
        servers that answer with ``303 See Other``, from the ``Location``
        header.
        """

        desired = {Capability.BROWSER_NAME.value: browser}
        desired.update(desired_capabilities or {})
        payload: dict[str, Any] = {"desiredCapabilities": desired}
        if required_capabilities:
            payload["requiredCapabilities"] = required_capabilities

        result = self.request("POST", "/session", payload)
        session_id = result.envelope.session_id
        if not session_id and result.response.location:
            session_id = result.response.location.rstrip("/").rsplit("/", 1)[-1]
        if not session_id:
            raise MalformedResponse("Session creation returned no session id", result.response.body)
        LOGGER.info("Created session %s for %s", session_id, browser)
        return self.attach(session_id)

    def attach(self, session_id: str) -> Session:
        """Return the :class:`Session` for an existing ``session_id``."""

        return self.create_child("session", session_id, kind=Session)

    def sessions(self) -> list[Any]:
        return list(self.invoke("sessions") or [])
