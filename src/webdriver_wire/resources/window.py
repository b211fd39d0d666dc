"""Window, timeouts, IME and touch sub-resources of a session."""

from __future__ import annotations

from ..commands.catalog import IME_COMMANDS, TIMEOUTS_COMMANDS, TOUCH_COMMANDS, WINDOW_COMMANDS
from .base import ResourceNode


class Window(ResourceNode):
    """A browser window addressed at ``{session}/window/{handle}``."""

    commands = WINDOW_COMMANDS

    @property
    def handle(self) -> str:
        return self.base_url.rsplit("/", 1)[-1]


class Timeouts(ResourceNode):
    commands = TIMEOUTS_COMMANDS


class Ime(ResourceNode):
    commands = IME_COMMANDS


class Touch(ResourceNode):
    commands = TOUCH_COMMANDS
