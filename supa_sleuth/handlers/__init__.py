"""Telegram update handlers."""

from .commands import command_argument, link_command, safe_reply
from .errors import error_handler
from .fallback import fallback_message

__all__ = [
    "command_argument",
    "error_handler",
    "fallback_message",
    "link_command",
    "safe_reply",
]
