"""Command tables for each JSON Wire Protocol resource kind."""

from __future__ import annotations

from .table import CommandTable

ROOT_COMMANDS = CommandTable(
    {
        "status": ["GET"],
        "session": ["POST"],
        "sessions": ["GET"],
    }
)

# Commands shared by resources that can locate elements (sessions and elements).
CONTAINER_COMMANDS = CommandTable(
    {
        "element": ["POST"],
        "elements": ["POST"],
    }
)

SESSION_COMMANDS = CONTAINER_COMMANDS.merged(
    CommandTable(
        {
            "window_handle": ["GET"],
            "window_handles": ["GET"],
            "url": ["GET", "POST"],  # POST is also available as Session.open()
            "forward": ["POST"],
            "back": ["POST"],
            "refresh": ["POST"],
            "execute": ["POST"],
            "execute_async": ["POST"],
            "screenshot": ["GET"],
            "frame": ["POST"],
            "cookie": ["GET", "POST"],  # DELETE through Session.delete_all_cookies()
            "source": ["GET"],
            "title": ["GET"],
            "keys": ["POST"],
            "orientation": ["GET", "POST"],
            "alert_text": ["GET", "POST"],
            "accept_alert": ["POST"],
            "dismiss_alert": ["POST"],
            "moveto": ["POST"],
            "click": ["POST"],
            "buttondown": ["POST"],
            "buttonup": ["POST"],
            "doubleclick": ["POST"],
            "location": ["GET", "POST"],
        },
        obsolete={
            "modifier": ["POST"],
            "speed": ["GET", "POST"],
        },
    )
)

ELEMENT_COMMANDS = CONTAINER_COMMANDS.merged(
    CommandTable(
        {
            "click": ["POST"],
            "submit": ["POST"],
            "text": ["GET"],
            "value": ["POST"],
            "name": ["GET"],
            "clear": ["POST"],
            "selected": ["GET"],
            "enabled": ["GET"],
            "attribute": ["GET"],
            "equals": ["GET"],
            "displayed": ["GET"],
            "location": ["GET"],
            "location_in_view": ["GET"],
            "size": ["GET"],
            "css": ["GET"],
        },
        obsolete={
            "toggle": ["POST"],
            "hover": ["POST"],
            "drag": ["POST"],
        },
    )
)

WINDOW_COMMANDS = CommandTable(
    {
        "size": ["GET", "POST"],
        "position": ["GET", "POST"],
        "maximize": ["POST"],
    }
)

TIMEOUTS_COMMANDS = CommandTable(
    {
        "async_script": ["POST"],
        "implicit_wait": ["POST"],
    }
)

IME_COMMANDS = CommandTable(
    {
        "available_engines": ["GET"],
        "active_engine": ["GET"],
        "activated": ["GET"],
        "deactivate": ["POST"],
        "activate": ["POST"],
    }
)

TOUCH_COMMANDS = CommandTable(
    {
        "click": ["POST"],
        "down": ["POST"],
        "up": ["POST"],
        "move": ["POST"],
        "scroll": ["POST"],
        "doubleclick": ["POST"],
        "longclick": ["POST"],
        "flick": ["POST"],
    }
)

STORAGE_COMMANDS = CommandTable(
    {
        "key": ["GET", "DELETE"],
        "size": ["GET"],
    }
)
