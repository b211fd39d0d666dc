from __future__ import annotations

import json
from collections import deque
from typing import Any, Deque, Optional

import pytest

from webdriver_wire.dispatcher import Dispatcher
from webdriver_wire.models import WireRequest, WireResponse
from webdriver_wire.transport.base import Transport

BASE = "http://localhost:4444/wd/hub"


class RecordingTransport(Transport):
    """Transport stub that records requests and replays queued responses."""

    def __init__(self) -> None:
        self.requests: list[WireRequest] = []
        self._responses: Deque[WireResponse] = deque()
        self.closed = False

    def reply(
        self,
        value: Any = None,
        *,
        status: int = 0,
        session_id: Optional[str] = None,
        http_status: int = 200,
    ) -> None:
        payload: dict[str, Any] = {"status": status, "value": value}
        if session_id is not None:
            payload["sessionId"] = session_id
        self._responses.append(WireResponse(http_status, json.dumps(payload).encode()))

    def reply_raw(self, response: WireResponse) -> None:
        self._responses.append(response)

    def send(self, request: WireRequest) -> WireResponse:
        self.requests.append(request)
        if self._responses:
            return self._responses.popleft()
        return WireResponse(200, b'{"status": 0, "value": null}')

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> WireRequest:
        return self.requests[-1]

    def last_json(self) -> Any:
        body = self.last.body
        return None if body is None else json.loads(body)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def dispatcher(transport: RecordingTransport) -> Dispatcher:
    return Dispatcher(transport)
