"""Factories for constructing components from configuration."""

from __future__ import annotations

from .client import WebDriver
from .config import ClientConfig
from .dispatcher import Dispatcher
from .transport.base import Transport
from .transport.http import HttpxTransport


def build_transport(config: ClientConfig) -> Transport:
    return HttpxTransport(timeout=config.timeout, verify=config.verify_tls)


def build_driver(config: ClientConfig) -> WebDriver:
    return WebDriver(config.base_url, Dispatcher(build_transport(config)))
