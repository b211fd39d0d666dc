"""Table-driven dispatch of JSON Wire Protocol commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from . import codec
from .commands.table import CommandTable, LookupStatus
from .errors import (
    InvalidVerbForCommand,
    NoParametersExpected,
    ObsoleteCommand,
    TooManyArguments,
    UnknownCommand,
)
from .models import Envelope, HttpVerb, WireRequest, WireResponse
from .transport.base import Transport

LOGGER = logging.getLogger(__name__)

Verb = Union[HttpVerb, str]


@dataclass(frozen=True)
class CommandResult:
    """Decoded value together with the envelope and raw response."""

    value: Any
    envelope: Envelope
    response: WireResponse


def is_scalar(argument: Any) -> bool:
    """Scalars are appended to the URL; everything else is a JSON body."""

    return isinstance(argument, (str, int, float)) and not isinstance(argument, bool)


class Dispatcher:
    """Resolve, validate and send commands through a :class:`Transport`."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def invoke(
        self,
        base_url: str,
        commands: CommandTable,
        name: str,
        *arguments: Any,
        verb: Optional[Verb] = None,
    ) -> Any:
        """Invoke ``name`` relative to ``base_url`` and return its value.

        With no explicit ``verb`` an argument forces POST; otherwise the
        command's default verb is used. All validation happens before the
        request is sent.
        """

        if len(arguments) > 1:
            raise TooManyArguments(
                "Commands should have at most only one parameter,"
                " which should be the JSON Parameter object"
            )
        argument = arguments[0] if arguments else None

        lookup = commands.lookup(name)
        if lookup.status is LookupStatus.OBSOLETE:
            raise ObsoleteCommand(f"{name} is an obsolete WebDriver command.")
        if lookup.spec is None:
            raise UnknownCommand(f"{name} is not a valid WebDriver command.")

        if verb is not None:
            try:
                resolved = HttpVerb.coerce(verb)
            except ValueError as exc:
                raise InvalidVerbForCommand(
                    f"{verb} is not an available http method for the command {name}."
                ) from exc
        elif argument is not None:
            resolved = HttpVerb.POST
        else:
            resolved = lookup.spec.default_verb
        if not lookup.spec.allows(resolved):
            raise InvalidVerbForCommand(
                f"{resolved.value} is not an available http method for the command {name}."
            )

        if is_scalar(argument) and resolved is HttpVerb.POST:
            argument = {name.rsplit("/", 1)[-1]: argument}
        return self.request(resolved, f"{base_url}/{name}", argument).value

    def request(self, verb: Verb, url: str, argument: Any = None) -> CommandResult:
        """Send one request without consulting a command table."""

        verb = HttpVerb.coerce(verb)
        body: Optional[bytes] = None
        if argument is not None:
            if is_scalar(argument):
                url = f"{url}/{argument}"
            elif verb is HttpVerb.POST:
                body = codec.encode(argument)
            else:
                raise NoParametersExpected(
                    f"The http method called for {url} is {verb.value} but it has to be"
                    f" POST if you want to pass the JSON params {codec.encode(argument).decode()}"
                )

        response = self._transport.send(WireRequest(verb=verb, url=url, body=body))
        if response.location and not response.body.strip():
            envelope = Envelope(status=0)
        else:
            envelope = codec.decode(response.body)
        LOGGER.debug("%s %s -> status %s", verb.value, url, envelope.status)
        return CommandResult(value=codec.unwrap(envelope), envelope=envelope, response=response)
