"""Console output for the crosspath command line.

Results are written as plain text so that a path containing brackets is
never interpreted as Rich markup; status lines use the theme colors.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")
    DEBUG = ("[D]", "debug", "magenta")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    path: str
    dim: str
    debug: str = "magenta"


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        path='white',
        dim='bright_black',
        debug='bright_magenta',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        path='bright_green',
        dim='green',
    ),
}


class ConsoleManager:
    """Themed wrapper around a Rich console."""

    def __init__(self, theme: str = 'manhattan', file: Optional[TextIO] = None):
        """
        Initialize console manager.

        Args:
            theme: Theme name (manhattan, green)
            file: Output stream, stdout by default
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        return Theme({
            'info': self.theme_colors.info,
            'warning': self.theme_colors.warning,
            'error': self.theme_colors.error,
            'success': self.theme_colors.success,
            'path': self.theme_colors.path,
            'dim': self.theme_colors.dim,
            'debug': self.theme_colors.debug,
        })

    def print_result(self, value: str):
        """Print one operation result verbatim."""
        self.console.print(Text(value, style="path"), soft_wrap=True)

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text, soft_wrap=True)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_debug(self, message: str):
        """Print a debug message."""
        self.print_status(StatusType.DEBUG, message)
