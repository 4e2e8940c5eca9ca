"""User-facing message rendering for helmsafe."""

import sys
from enum import Enum
from typing import Iterable, List, Optional, TextIO

from ..constants import (
    CLR_RESET, CLR_BOLD_RED, CLR_BOLD_YELLOW, CLR_YELLOW,
    CLR_CYAN, CLR_GREEN, CLR_MAGENTA, CLR_BLUE
)

LIST_COLORS = [CLR_CYAN, CLR_GREEN, CLR_YELLOW, CLR_MAGENTA, CLR_BLUE]


class MessageType(Enum):
    """Category of a user-facing message."""
    NOTICE = "notice"
    WARNING = "warning"
    ALERT = "alert"
    PRODUCTION_ALERT = "production_alert"


def print_message(msg_type: MessageType, title: str, message: str = "",
                  hint: str = "", stream: Optional[TextIO] = None) -> None:
    """Print a message in the uniform, styled format for its type.
    
    Args:
        msg_type: Category of the message
        title: Headline of the message
        message: Optional detail line
        hint: Optional actionable hint printed last
        stream: Output stream (stdout if None)
    """
    out = stream or sys.stdout

    if msg_type == MessageType.NOTICE:
        print(f"{CLR_BOLD_YELLOW}❗ NOTICE: {title}{CLR_RESET}", file=out)
        if message:
            print(f"          {message}", file=out)
    elif msg_type == MessageType.WARNING:
        print(f"{CLR_YELLOW}✋ WARNING: {CLR_BOLD_YELLOW}{title}{CLR_RESET}", file=out)
        if message:
            print(f"{CLR_BLUE}         -> {CLR_RESET}{message}", file=out)
    elif msg_type == MessageType.ALERT:
        print(f"{CLR_BOLD_YELLOW}⚠️  {title} ⚠️{CLR_RESET}", file=out)
    elif msg_type == MessageType.PRODUCTION_ALERT:
        print(f"{CLR_BOLD_RED}🚨 {title} 🚨{CLR_RESET}", file=out)
        if message:
            print(f"   {message}", file=out)

    if hint:
        print(f"{CLR_YELLOW}   {hint}{CLR_RESET}", file=out)
    
    out.flush()


def print_colored_list(items: Iterable[str], stream: Optional[TextIO] = None) -> None:
    """Print items comma-separated, cycling through the list colors."""
    out = stream or sys.stdout
    colored = [
        f"{LIST_COLORS[i % len(LIST_COLORS)]}{item}{CLR_RESET}"
        for i, item in enumerate(items)
    ]
    print(", ".join(colored), file=out)


def format_command_line(args: List[str]) -> str:
    """Reconstruct the helm command line for display."""
    return " ".join(["helm", *args])
