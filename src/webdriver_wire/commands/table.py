"""Static command tables mapping command names to allowed HTTP verbs."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import ObsoleteCommand, UnknownCommand
from ..models import HttpVerb

VerbSpec = Union[str, HttpVerb, Iterable[Union[str, HttpVerb]]]


@dataclass(frozen=True)
class CommandSpec:
    """A command name and the verbs it accepts; the first verb is the default."""

    name: str
    verbs: tuple[HttpVerb, ...]

    def __post_init__(self) -> None:
        if not self.verbs:
            raise ValueError(f"Command {self.name!r} must allow at least one verb")

    @property
    def default_verb(self) -> HttpVerb:
        return self.verbs[0]

    def allows(self, verb: HttpVerb) -> bool:
        return verb in self.verbs

    @classmethod
    def build(cls, name: str, verbs: VerbSpec) -> "CommandSpec":
        if isinstance(verbs, (str, HttpVerb)):
            verbs = [verbs]
        ordered: list[HttpVerb] = []
        for verb in verbs:
            coerced = HttpVerb.coerce(verb)
            if coerced not in ordered:
                ordered.append(coerced)
        return cls(name=name, verbs=tuple(ordered))


class LookupStatus(str, enum.Enum):
    FOUND = "found"
    OBSOLETE = "obsolete"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class CommandLookup:
    """Result of looking a command up in a live and obsolete table pair."""

    status: LookupStatus
    name: str
    spec: Optional[CommandSpec] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class CommandTable:
    """Immutable mapping of command name to :class:`CommandSpec`.

    A table optionally carries a second table of obsolete commands so that a
    lookup can tell "deprecated" apart from "never existed".
    """

    def __init__(
        self,
        commands: Optional[Mapping[str, VerbSpec]] = None,
        *,
        obsolete: Optional[Mapping[str, VerbSpec]] = None,
    ) -> None:
        self._commands: dict[str, CommandSpec] = {
            name: CommandSpec.build(name, verbs) for name, verbs in (commands or {}).items()
        }
        self._obsolete: dict[str, CommandSpec] = {
            name: CommandSpec.build(name, verbs) for name, verbs in (obsolete or {}).items()
        }

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandTable({sorted(self._commands)!r})"

    @property
    def obsolete(self) -> tuple[CommandSpec, ...]:
        return tuple(self._obsolete.values())

    def lookup(self, name: str) -> CommandLookup:
        spec = self._commands.get(name)
        if spec is not None:
            return CommandLookup(LookupStatus.FOUND, name, spec)
        spec = self._obsolete.get(name)
        if spec is not None:
            return CommandLookup(LookupStatus.OBSOLETE, name, spec)
        return CommandLookup(LookupStatus.NOT_FOUND, name)

    def require(self, name: str) -> CommandSpec:
        """Return the live spec for ``name`` or raise the matching error."""

        result = self.lookup(name)
        if result.status is LookupStatus.OBSOLETE:
            raise ObsoleteCommand(f"{name} is an obsolete WebDriver command.")
        if result.spec is None:
            raise UnknownCommand(f"{name} is not a valid WebDriver command.")
        return result.spec

    def default_verb(self, name: str) -> HttpVerb:
        return self.require(name).default_verb

    def merged(self, other: "CommandTable") -> "CommandTable":
        """Return a new table with ``other``'s entries layered over this one."""

        table = CommandTable()
        table._commands = {**self._commands, **other._commands}
        table._obsolete = {**self._obsolete, **other._obsolete}
        return table
