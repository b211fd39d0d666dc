"""Command line interface for webdriver-wire."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console

from .client import WebDriver
from .config import ClientConfig, load_config
from .errors import WebDriverError
from .factory import build_driver
from .models import HttpVerb

app = typer.Typer(help="JSON Wire Protocol client")

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to YAML configuration."),
]
EnvFileOption = Annotated[
    Optional[Path],
    typer.Option("--env-file", help="Path to an .env file with default configuration values."),
]
BaseUrlOption = Annotated[
    Optional[str],
    typer.Option("--base-url", help="WebDriver server URL, e.g. http://localhost:4444/wd/hub."),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging before executing any command."""

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _load(
    config_path: Optional[Path],
    env_file: Optional[Path],
    base_url: Optional[str],
) -> ClientConfig:
    overrides: dict[str, Any] = {}
    if base_url:
        overrides["base_url"] = base_url
    return load_config(config_path, env_file=env_file, **overrides)


@contextmanager
def _driver(config: ClientConfig) -> Iterator[WebDriver]:
    driver = build_driver(config)
    try:
        yield driver
    except WebDriverError as exc:
        Console().print(f"{type(exc).__name__}: {exc}", style="red", markup=False)
        raise typer.Exit(code=1) from exc
    finally:
        driver.close()


def _print_value(value: Any) -> None:
    Console().print_json(data=value)


def _parse_argument(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command()
def version() -> None:
    """Print the package version."""

    try:
        typer.echo(get_version("webdriver-wire"))
    except PackageNotFoundError:  # pragma: no cover - when running from source tree
        typer.echo("0.0.0")


@app.command()
def status(
    config_path: ConfigOption = None,
    env_file: EnvFileOption = None,
    base_url: BaseUrlOption = None,
) -> None:
    """Query the server status."""

    with _driver(_load(config_path, env_file, base_url)) as driver:
        _print_value(driver.status())


@app.command()
def sessions(
    config_path: ConfigOption = None,
    env_file: EnvFileOption = None,
    base_url: BaseUrlOption = None,
) -> None:
    """List the sessions active on the server."""

    with _driver(_load(config_path, env_file, base_url)) as driver:
        _print_value(driver.sessions())


@app.command("new-session")
def new_session(
    browser: Annotated[
        Optional[str],
        typer.Option("--browser", "-b", help="Browser name to request."),
    ] = None,
    config_path: ConfigOption = None,
    env_file: EnvFileOption = None,
    base_url: BaseUrlOption = None,
) -> None:
    """Create a session and print its id."""

    config = _load(config_path, env_file, base_url)
    with _driver(config) as driver:
        session = driver.session(
            browser or config.browser,
            desired_capabilities=config.desired_capabilities,
        )
        typer.echo(session.id)


@app.command()
def invoke(
    session_id: Annotated[str, typer.Argument(help="Id of an existing session.")],
    command: Annotated[str, typer.Argument(help="Session command name, e.g. title or url.")],
    argument: Annotated[
        Optional[str],
        typer.Argument(help="Optional argument; parsed as JSON when possible."),
    ] = None,
    verb: Annotated[
        Optional[HttpVerb],
        typer.Option("--verb", case_sensitive=False, help="Explicit HTTP verb."),
    ] = None,
    config_path: ConfigOption = None,
    env_file: EnvFileOption = None,
    base_url: BaseUrlOption = None,
) -> None:
    """Invoke a command on an existing session and print the value."""

    parsed = _parse_argument(argument)
    arguments = () if parsed is None else (parsed,)
    with _driver(_load(config_path, env_file, base_url)) as driver:
        value = driver.attach(session_id).invoke(command, *arguments, verb=verb)
        _print_value(value)


@app.command()
def close(
    session_id: Annotated[str, typer.Argument(help="Id of the session to end.")],
    config_path: ConfigOption = None,
    env_file: EnvFileOption = None,
    base_url: BaseUrlOption = None,
) -> None:
    """End a session."""

    with _driver(_load(config_path, env_file, base_url)) as driver:
        driver.attach(session_id).close()
        typer.echo(f"Closed session {session_id}")


if __name__ == "__main__":
    app()
