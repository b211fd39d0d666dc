"""httpx-backed transport."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..errors import TransportError
from ..models import WireRequest, WireResponse
from .base import REQUEST_HEADERS, Transport

LOGGER = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Send wire requests through a pooled :class:`httpx.Client`."""

    def __init__(
        self,
        *,
        timeout: Optional[float] = 60.0,
        verify: bool = True,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            verify=verify,
            follow_redirects=False,
        )

    def send(self, request: WireRequest) -> WireResponse:
        LOGGER.debug("%s %s", request.verb.value, request.url)
        try:
            response = self._client.request(
                request.verb.value,
                request.url,
                content=request.body,
                headers=REQUEST_HEADERS,
            )
        except httpx.HTTPError as exc:
            raise TransportError(request.verb.value, request.url, exc) from exc
        LOGGER.debug("HTTP %s from %s", response.status_code, request.url)
        return WireResponse(
            status_code=response.status_code,
            body=response.content,
            location=response.headers.get("location"),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
