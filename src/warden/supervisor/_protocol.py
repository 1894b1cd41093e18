"""Protocol definitions for the supervisor system.

This module defines the interfaces that decouple the lifecycle controller
from process creation and operator output:
- Launcher: Protocol for running the server in the foreground or detached
- Reporter: Protocol for operator-facing progress and result messages
"""

from collections.abc import Sequence
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class Launcher(Protocol):
    """Protocol for starting the server process.

    Implementations must support:
    - A foreground run that blocks until the server exits
    - A detached launch that returns as soon as the process exists
    """

    def run_foreground(self, command: Sequence[str], *, cwd: Path) -> int:
        """Run the server attached to the current terminal.

        Args:
            command: Executable and arguments.
            cwd: Working directory for the server.

        Returns:
            The server's exit code.
        """
        ...

    def spawn_detached(
        self, command: Sequence[str], *, cwd: Path, console_log: Path
    ) -> int:
        """Launch the server detached from the controlling terminal.

        Args:
            command: Executable and arguments.
            cwd: Working directory for the server.
            console_log: File that receives the server's stdout and stderr.

        Returns:
            The pid of the launched process.
        """
        ...


@runtime_checkable
class Reporter(Protocol):
    """Protocol for operator-facing output.

    Lifecycle operations report what they are doing as they do it. The
    stop loop uses `progress` to print a dot per second on one line.
    """

    def message(self, text: str) -> None:
        """Print a complete line."""
        ...

    def progress(self, text: str) -> None:
        """Print text without ending the line."""
        ...

    def error(self, text: str) -> None:
        """Print an error line."""
        ...
