"""Encoding of request parameters and decoding of response envelopes."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from .errors import MalformedResponse, UnserializableArgument, remote_failure
from .models import Envelope

LOGGER = logging.getLogger(__name__)


def encode(params: Any) -> bytes:
    """Serialise ``params`` as a compact UTF-8 JSON document."""

    try:
        text = json.dumps(params, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise UnserializableArgument(f"Argument is not JSON serialisable: {exc}") from exc
    return text.encode("utf-8")


def decode(body: bytes) -> Envelope:
    """Parse a raw response body into an :class:`Envelope`.

    The body must be a JSON object carrying an integer ``status``. When
    ``value`` is itself an object with a ``message`` key, that message is
    lifted into :attr:`Envelope.error_message`.
    """

    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedResponse(f"Response is not valid JSON: {exc}", body) from exc
    if not isinstance(data, dict):
        raise MalformedResponse("Response is not a JSON object", body)
    if "status" not in data:
        raise MalformedResponse("Response is missing the 'status' field", body)

    value = data.get("value")
    message = None
    if isinstance(value, dict) and "message" in value:
        message = value["message"]
        if message is not None and not isinstance(message, str):
            message = str(message)
    try:
        return Envelope(
            status=data["status"],
            value=value,
            session_id=data.get("sessionId"),
            error_message=message,
        )
    except ValidationError as exc:
        raise MalformedResponse(f"Invalid response envelope: {exc}", body) from exc


def unwrap(envelope: Envelope) -> Any:
    """Return the envelope value or raise the error for its status code."""

    if envelope.ok:
        return envelope.value
    error = remote_failure(envelope.status, envelope.error_message)
    LOGGER.warning("Remote command failed with %s", error)
    raise error
