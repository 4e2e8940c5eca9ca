"""Utility functions and helpers for helmsafe."""

from .logging import logger, Logger
from .helpers import is_truthy
from .display import MessageType, print_message, print_colored_list, format_command_line

__all__ = [
    "logger",
    "Logger",
    "is_truthy",
    "MessageType",
    "print_message",
    "print_colored_list",
    "format_command_line",
]
