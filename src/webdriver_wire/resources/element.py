"""Element lookup and the element resource."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from ..commands.catalog import CONTAINER_COMMANDS, ELEMENT_COMMANDS
from ..models import LocatorStrategy
from .base import ResourceNode

ELEMENT_KEY = "ELEMENT"


class Container(ResourceNode, ABC):
    """A resource that can locate elements beneath it."""

    commands = CONTAINER_COMMANDS

    def element(
        self,
        using: Union[LocatorStrategy, str, dict[str, Any]],
        value: Optional[str] = None,
    ) -> Optional["Element"]:
        """Find the first element matching ``using``/``value``.

        ``using`` may also be a complete ``{"using": ..., "value": ...}`` object.
        """

        result = self.invoke("element", self._locator(using, value))
        return self._element_from(result)

    def elements(
        self,
        using: Union[LocatorStrategy, str, dict[str, Any]],
        value: Optional[str] = None,
    ) -> list["Element"]:
        """Find every element matching ``using``/``value``."""

        results = self.invoke("elements", self._locator(using, value)) or []
        found = (self._element_from(item) for item in results)
        return [element for element in found if element is not None]

    @abstractmethod
    def element_path(self, element_id: str) -> str:
        """Return the URL of the element with ``element_id``."""

    def _element_from(self, value: Any) -> Optional["Element"]:
        if not isinstance(value, dict) or ELEMENT_KEY not in value:
            return None
        return Element(self.element_path(str(value[ELEMENT_KEY])), self._dispatcher)

    @staticmethod
    def _locator(
        using: Union[LocatorStrategy, str, dict[str, Any]],
        value: Optional[str],
    ) -> dict[str, Any]:
        if isinstance(using, dict):
            return using
        if value is None:
            raise ValueError("A locator value is required with a strategy")
        strategy = using.value if isinstance(using, LocatorStrategy) else using
        return {"using": strategy, "value": value}


class Element(Container):
    """A DOM element addressed at ``{session}/element/{id}``."""

    commands = ELEMENT_COMMANDS

    @property
    def id(self) -> str:
        return self.base_url.rsplit("/", 1)[-1]

    @property
    def session_url(self) -> str:
        return self.base_url.rsplit("/element/", 1)[0]

    def element_path(self, element_id: str) -> str:
        return f"{self.session_url}/element/{element_id}"
