"""Console reporter for lifecycle operations.

This module provides the Rich-backed implementation of the Reporter
protocol used by the CLI.
"""

from typing import final

from rich.console import Console
from rich.style import Style
from rich.text import Text


@final
class ConsoleReporter:
    """Reporter that writes plain operator messages to the terminal.

    Messages go to stdout. Errors go to stderr, styled in red.
    """

    __slots__ = ("_console", "_error_console", "_error_style")

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        """Initialize the reporter.

        Args:
            console: Console for normal output. If None, creates a new one.
            error_console: Console for errors. If None, uses stderr.
        """
        self._console = console or Console(highlight=False)
        self._error_console = error_console or Console(stderr=True, highlight=False)
        self._error_style = Style(color="red")

    def message(self, text: str) -> None:
        """Print a complete line."""
        self._console.print(Text(text), soft_wrap=True)

    def progress(self, text: str) -> None:
        """Print text without ending the line."""
        self._console.print(Text(text), end="", soft_wrap=True)

    def error(self, text: str) -> None:
        """Print an error line."""
        self._error_console.print(
            Text(text, style=self._error_style), soft_wrap=True
        )
