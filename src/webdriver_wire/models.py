"""Shared models used across webdriver-wire."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "http://localhost:4444/wd/hub"


class HttpVerb(str, enum.Enum):
    """HTTP methods used by the JSON Wire Protocol."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"

    @classmethod
    def coerce(cls, value: "HttpVerb | str") -> "HttpVerb":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError as exc:
            raise ValueError(f"Unsupported HTTP verb: {value!r}") from exc


class Envelope(BaseModel):
    """Decoded ``{status, value, sessionId}`` response wrapper."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: int = Field(strict=True)
    value: Any = None
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 0


@dataclass(frozen=True)
class WireRequest:
    """A single HTTP request against the automation server."""

    verb: HttpVerb
    url: str
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        if self.body is not None and self.verb is not HttpVerb.POST:
            raise ValueError(f"{self.verb.value} requests cannot carry a body")


@dataclass(frozen=True)
class WireResponse:
    """Raw status and body returned by a transport."""

    status_code: int
    body: bytes
    location: Optional[str] = None


class LocatorStrategy(str, enum.Enum):
    """Element location strategies understood by ``/element`` and ``/elements``."""

    CLASS_NAME = "class name"
    CSS_SELECTOR = "css selector"
    ID = "id"
    NAME = "name"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TAG_NAME = "tag name"
    XPATH = "xpath"


class Capability(str, enum.Enum):
    """Keys of the desired capabilities object."""

    BROWSER_NAME = "browserName"
    VERSION = "version"
    PLATFORM = "platform"
    SUPPORTS_JAVASCRIPT = "javascriptEnabled"
    TAKES_SCREENSHOT = "takesScreenshot"
    SUPPORTS_ALERTS = "handlesAlerts"
    SUPPORTS_SQL_DATABASE = "databaseEnabled"
    SUPPORTS_LOCATION_CONTEXT = "locationContextEnabled"
    SUPPORTS_APPLICATION_CACHE = "applicationCacheEnabled"
    SUPPORTS_BROWSER_CONNECTION = "browserConnectionEnabled"
    SUPPORTS_FINDING_BY_CSS = "cssSelectorsEnabled"
    SUPPORTS_WEB_STORAGE = "webStorageEnabled"
    ROTATABLE = "rotatable"
    ACCEPT_SSL_CERTS = "acceptSslCerts"
    HAS_NATIVE_EVENTS = "nativeEvents"
    PROXY = "proxy"


class ProxyType(str, enum.Enum):
    """Values for the ``proxyType`` field of a proxy capability."""

    DIRECT = "direct"
    MANUAL = "manual"
    PAC = "pac"
    SYSTEM = "system"
