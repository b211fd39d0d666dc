"""Client for the Selenium JSON Wire Protocol."""

from .client import WebDriver
from .dispatcher import Dispatcher
from .models import DEFAULT_BASE_URL, HttpVerb
from .resources.session import Session

__all__ = ["DEFAULT_BASE_URL", "Dispatcher", "HttpVerb", "Session", "WebDriver"]
