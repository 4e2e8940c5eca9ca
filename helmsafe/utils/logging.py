"""Logging utilities for helmsafe."""

import sys
import datetime

from ..constants import (
    CLR_RESET, CLR_YELLOW, CLR_BOLD_YELLOW, CLR_WHITE, CLR_BOLD_WHITE,
    CLR_RED, CLR_BOLD_RED
)


class Logger:
    """Centralized logging for helmsafe with color coding and level management.

    Everything goes to stderr: stdout belongs to the wrapped helm process.
    """
    
    def __init__(self, debug_enabled: bool = False):
        self.debug_enabled = debug_enabled
        
        # Level color mapping
        self.level_map = {
            "Error": (CLR_RED, CLR_BOLD_RED),
            "Warning": (CLR_YELLOW, CLR_BOLD_YELLOW),
            "Debug": (CLR_WHITE, CLR_BOLD_WHITE),
        }
    
    def set_debug(self, enabled: bool) -> None:
        """Enable or disable debug logging."""
        self.debug_enabled = enabled
    
    def get_current_timestamp(self) -> str:
        """Returns the current timestamp in YYYY-MM-DD HH:MM:SS format."""
        return datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    
    def log_message(self, level: str, message: str) -> None:
        """Logs a message with a given level and color coding."""
        if level == "Debug" and not self.debug_enabled:
            return

        timestamp = self.get_current_timestamp()
        
        if level in self.level_map:
            header_color, content_color = self.level_map[level]
        else:
            header_color, content_color = CLR_WHITE, CLR_BOLD_WHITE

        stream = sys.stderr

        header_text = f"{header_color}[{timestamp}] [{level}]: {CLR_RESET}"
        
        # Continuation lines line up under the first character of the message
        indent_str = ' ' * len(f"[{timestamp}] [{level}]: ")

        lines = message.splitlines()
        if not lines:
            print(f"{header_text}{content_color}{CLR_RESET}", file=stream)
            return

        print(f"{header_text}{content_color}{lines[0]}{CLR_RESET}", file=stream)
        
        for line in lines[1:]:
            print(f"{indent_str}{content_color}{line}{CLR_RESET}", file=stream)
        
        stream.flush()
    
    def error(self, message: str) -> None:
        """Log an error message."""
        self.log_message("Error", message)
    
    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.log_message("Warning", message)
    
    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.log_message("Debug", message)


# Global logger instance (debug setting is applied by create_application)
logger = Logger()
