"""Exceptions raised while dispatching JSON Wire Protocol commands."""

from __future__ import annotations

from typing import Optional


class WebDriverError(Exception):
    """Base class for every error raised by webdriver-wire."""


class CommandError(WebDriverError):
    """Raised before any I/O when a command invocation is invalid."""


class TooManyArguments(CommandError):
    """A command was invoked with more than one argument."""


class UnknownCommand(CommandError):
    """The command name is not present in the live or obsolete tables."""


class ObsoleteCommand(CommandError):
    """The command name is only present in the obsolete table."""


class InvalidVerbForCommand(CommandError):
    """The resolved HTTP verb is not allowed for the command."""


class NoParametersExpected(CommandError):
    """A structured JSON argument was supplied with a non-POST verb."""


class UnserializableArgument(CommandError):
    """The command argument cannot be encoded as JSON."""


class TransportError(WebDriverError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, verb: str, url: str, cause: BaseException) -> None:
        super().__init__(f"HTTP {verb} to {url} failed: {cause}")
        self.verb = verb
        self.url = url
        self.cause = cause


class MalformedResponse(WebDriverError):
    """The response body is not a JSON Wire envelope."""

    def __init__(self, detail: str, body: bytes = b"") -> None:
        super().__init__(detail)
        self.detail = detail
        self.body = body


class RemoteCommandFailure(WebDriverError):
    """The server reported a non-zero status for a command."""

    def __init__(self, status: int, message: Optional[str] = None) -> None:
        text = f"status {status}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)
        self.status = status
        self.message = message


class NoSuchDriver(RemoteCommandFailure):
    """A session is either terminated or not started."""


class NoSuchElement(RemoteCommandFailure):
    """An element could not be located on the page."""


class NoSuchFrame(RemoteCommandFailure):
    """A request to switch to a frame could not be satisfied."""


class UnknownRemoteCommand(RemoteCommandFailure):
    """The server does not implement the requested resource."""


class StaleElementReference(RemoteCommandFailure):
    """The referenced element is no longer attached to the DOM."""


class ElementNotVisible(RemoteCommandFailure):
    """The element is not visible and may not be interacted with."""


class InvalidElementState(RemoteCommandFailure):
    """The element is in a state that forbids the command."""


class UnknownError(RemoteCommandFailure):
    """An unknown server-side error occurred."""


class ElementIsNotSelectable(RemoteCommandFailure):
    """The element may not be selected."""


class JavaScriptError(RemoteCommandFailure):
    """A script raised an error while executing."""


class XPathLookupError(RemoteCommandFailure):
    """An XPath expression could not be evaluated."""


class Timeout(RemoteCommandFailure):
    """An operation did not complete in time."""


class NoSuchWindow(RemoteCommandFailure):
    """The requested window does not exist."""


class InvalidCookieDomain(RemoteCommandFailure):
    """A cookie was set on a domain different from the current page."""


class UnableToSetCookie(RemoteCommandFailure):
    """The browser refused to set a cookie."""


class UnexpectedAlertOpen(RemoteCommandFailure):
    """A modal dialog was open and blocked the operation."""


class NoAlertOpenError(RemoteCommandFailure):
    """An alert operation was requested with no dialog open."""


class ScriptTimeout(RemoteCommandFailure):
    """An asynchronous script did not finish in time."""


class InvalidElementCoordinates(RemoteCommandFailure):
    """The coordinates supplied for an element are invalid."""


class IMENotAvailable(RemoteCommandFailure):
    """IME support is not available."""


class IMEEngineActivationFailed(RemoteCommandFailure):
    """An IME engine could not be started."""


class InvalidSelector(RemoteCommandFailure):
    """The selector is not a valid expression."""


class SessionNotCreated(RemoteCommandFailure):
    """A new session could not be created."""


class MoveTargetOutOfBounds(RemoteCommandFailure):
    """The mouse target lies outside the window."""


STATUS_ERRORS: dict[int, type[RemoteCommandFailure]] = {
    6: NoSuchDriver,
    7: NoSuchElement,
    8: NoSuchFrame,
    9: UnknownRemoteCommand,
    10: StaleElementReference,
    11: ElementNotVisible,
    12: InvalidElementState,
    13: UnknownError,
    15: ElementIsNotSelectable,
    17: JavaScriptError,
    19: XPathLookupError,
    21: Timeout,
    23: NoSuchWindow,
    24: InvalidCookieDomain,
    25: UnableToSetCookie,
    26: UnexpectedAlertOpen,
    27: NoAlertOpenError,
    28: ScriptTimeout,
    29: InvalidElementCoordinates,
    30: IMENotAvailable,
    31: IMEEngineActivationFailed,
    32: InvalidSelector,
    33: SessionNotCreated,
    34: MoveTargetOutOfBounds,
}


def remote_failure(status: int, message: Optional[str] = None) -> RemoteCommandFailure:
    """Return the exception registered for ``status`` (not raised)."""

    error_cls = STATUS_ERRORS.get(status, RemoteCommandFailure)
    return error_cls(status, message)
