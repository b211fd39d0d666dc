"""Web storage resources (``local_storage`` and ``session_storage``)."""

from __future__ import annotations

from typing import Any

from ..commands.catalog import STORAGE_COMMANDS
from .base import ResourceNode


class Storage(ResourceNode):
    """Key/value storage exposed by the browser."""

    commands = STORAGE_COMMANDS

    def get_all(self) -> Any:
        """Return every key in the store."""

        return self.request("GET").value

    def set(self, key: str, value: str) -> "Storage":
        self.request("POST", "", {"key": key, "value": value})
        return self

    def clear(self) -> "Storage":
        self.request("DELETE")
        return self

    def get(self, key: str) -> Any:
        return self.invoke("key", key, verb="GET")

    def delete(self, key: str) -> "Storage":
        self.invoke("key", key, verb="DELETE")
        return self

    def size(self) -> int:
        return self.invoke("size")


class LocalStorage(Storage):
    pass


class SessionStorage(Storage):
    pass


STORAGE_KINDS: dict[str, type[Storage]] = {
    "local": LocalStorage,
    "session": SessionStorage,
}
