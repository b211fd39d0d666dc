"""Browser session resource."""

from __future__ import annotations

from typing import Any, Optional, Union

from ..commands.catalog import SESSION_COMMANDS
from ..errors import TooManyArguments
from .element import Container, Element
from .storage import STORAGE_KINDS, Storage
from .window import Ime, Timeouts, Touch, Window


class Session(Container):
    """A WebDriver session addressed at ``{base}/session/{id}``.

    Commands in :data:`SESSION_COMMANDS` are available as generated methods
    (``session.title()``, ``session.get_url()``, ``session.url(address)``).
    The methods below cover operations that verb inference cannot express.
    """

    commands = SESSION_COMMANDS

    @property
    def id(self) -> str:
        return self.base_url.rsplit("/", 1)[-1]

    def open(self, url: Union[str, dict[str, Any]]) -> "Session":
        """Navigate to ``url`` (``POST /url``)."""

        self.request("POST", "/url", url if isinstance(url, dict) else {"url": url})
        return self

    def capabilities(self) -> Any:
        return self.request("GET").value

    def close(self) -> Any:
        """End the session (``DELETE`` on the session URL)."""

        return self.request("DELETE").value

    # GET and DELETE on /cookie take no parameters, so verb inference cannot
    # tell them apart; each gets its own method.

    def get_all_cookies(self) -> Any:
        return self.request("GET", "/cookie").value

    def set_cookie(self, cookie: Union[dict[str, Any], str]) -> "Session":
        self.request("POST", "/cookie", cookie if isinstance(cookie, dict) else {"cookie": cookie})
        return self

    def delete_all_cookies(self) -> "Session":
        self.request("DELETE", "/cookie")
        return self

    def delete_cookie(self, name: str) -> "Session":
        self.request("DELETE", f"/cookie/{name}")
        return self

    def window(
        self, target: Union[str, dict[str, Any], None] = None
    ) -> Union["Session", Window]:
        """Close, focus or address a window.

        With no argument the current window is closed. A JSON object switches
        focus. A handle returns a :class:`Window` for chaining.
        """

        if target is None:
            self.request("DELETE", "/window")
            return self
        if isinstance(target, dict):
            self.request("POST", "/window", target)
            return self
        return self.create_child("window", target, kind=Window)

    def delete_window(self) -> "Session":
        self.request("DELETE", "/window")
        return self

    def focus_window(self, name: str) -> "Session":
        self.request("POST", "/window", {"name": name})
        return self

    def timeouts(self, *arguments: Any) -> Union["Session", Timeouts]:
        """Set a timeout or return the :class:`Timeouts` resource.

        Accepts a JSON object, or a ``(type, ms)`` pair such as
        ``("script", 5000)``.
        """

        if len(arguments) > 2:
            raise TooManyArguments("timeouts() takes a JSON object or a (type, ms) pair")
        if len(arguments) == 1:
            self.request("POST", "/timeouts", arguments[0])
            return self
        if len(arguments) == 2:
            self.request("POST", "/timeouts", {"type": arguments[0], "ms": arguments[1]})
            return self
        return self.create_child("timeouts", kind=Timeouts)

    def ime(self) -> Ime:
        return self.create_child("ime", kind=Ime)

    def touch(self) -> Touch:
        return self.create_child("touch", kind=Touch)

    def local_storage(self) -> Storage:
        return self.create_child("local_storage", kind=STORAGE_KINDS["local"])

    def session_storage(self) -> Storage:
        return self.create_child("session_storage", kind=STORAGE_KINDS["session"])

    def active_element(self) -> Optional[Element]:
        """Return the element that currently has focus."""

        return self._element_from(self.request("POST", "/element/active").value)

    def element_path(self, element_id: str) -> str:
        return f"{self.base_url}/element/{element_id}"
