"""Addressable resource nodes and their generated command wrappers."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional, TypeVar

from ..commands.table import CommandTable
from ..dispatcher import CommandResult, Dispatcher, Verb
from ..models import HttpVerb

NodeT = TypeVar("NodeT", bound="ResourceNode")


def _command_wrapper(name: str, verb: Optional[HttpVerb]) -> Callable[..., Any]:
    def wrapper(self: "ResourceNode", *arguments: Any) -> Any:
        return self.invoke(name, *arguments, verb=verb)

    if verb is None:
        wrapper.__name__ = name
        wrapper.__doc__ = f"Invoke ``{name}`` with the default verb (POST when given an argument)."
    else:
        wrapper.__name__ = f"{verb.value.lower()}_{name}"
        wrapper.__doc__ = f"Invoke ``{name}`` with HTTP {verb.value}."
    return wrapper


class ResourceNode:
    """An entity in the protocol's URL hierarchy.

    Subclasses declare a class-level ``commands`` table. When the subclass is
    created a method is generated for every command, plus ``get_``/``post_``/
    ``delete_`` variants for each verb the command allows. Names already
    defined on the class are left alone and stay reachable through
    :meth:`invoke`.
    """

    commands: ClassVar[CommandTable] = CommandTable()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "commands" not in cls.__dict__:
            return
        for spec in cls.commands:
            candidates = [(spec.name, None)]
            candidates.extend((f"{verb.value.lower()}_{spec.name}", verb) for verb in spec.verbs)
            for attribute, verb in candidates:
                if not hasattr(cls, attribute):
                    setattr(cls, attribute, _command_wrapper(spec.name, verb))

    def __init__(
        self,
        base_url: str,
        dispatcher: Dispatcher,
        *,
        commands: Optional[CommandTable] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._dispatcher = dispatcher
        self._commands = commands if commands is not None else type(self).commands

    def __str__(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_url!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceNode):
            return NotImplemented
        return type(self) is type(other) and self._base_url == other._base_url

    def __hash__(self) -> int:
        return hash((type(self), self._base_url))

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def command_table(self) -> CommandTable:
        return self._commands

    def invoke(self, name: str, *arguments: Any, verb: Optional[Verb] = None) -> Any:
        """Invoke a command from this node's table and return its value."""

        return self._dispatcher.invoke(
            self._base_url, self._commands, name, *arguments, verb=verb
        )

    def request(self, verb: Verb, path: str = "", argument: Any = None) -> CommandResult:
        """Send ``verb`` to ``base_url + path`` without table validation."""

        return self._dispatcher.request(verb, f"{self._base_url}{path}", argument)

    def create_child(
        self,
        segment: str,
        identifier: Optional[str] = None,
        kind: Optional[type[NodeT]] = None,
        *,
        commands: Optional[CommandTable] = None,
    ) -> NodeT:
        """Return a new node addressed at ``base_url/segment[/identifier]``.

        ``commands`` replaces the table the node's class declares, which lets a
        plain :class:`ResourceNode` child carry its own commands.
        """

        url = f"{self._base_url}/{segment.strip('/')}"
        if identifier is not None:
            url = f"{url}/{identifier}"
        node_cls = kind or ResourceNode
        return node_cls(url, self._dispatcher, commands=commands)  # type: ignore[return-value]
