"""Process launching for the supervisor system.

This module provides SubprocessLauncher, which starts the server either
in the foreground, with the controller blocking on it, or detached in
its own session with output appended to the console log.
"""

import signal
import subprocess
from collections.abc import Sequence
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations
from typing import final


@final
class SubprocessLauncher:
    """Launcher backed by the subprocess module."""

    __slots__ = ()

    def run_foreground(self, command: Sequence[str], *, cwd: Path) -> int:
        """Run the server and block until it exits.

        The server inherits the controller's standard streams. SIGTERM sent
        to the controller is forwarded to the server. An interrupt from the
        terminal reaches the server directly, so the controller keeps
        waiting for it to exit.

        Args:
            command: Executable and arguments.
            cwd: Working directory for the server.

        Returns:
            The server's exit code.
        """
        process = subprocess.Popen(list(command), cwd=cwd)  # noqa: S603

        def _forward(signum: int, _frame: object) -> None:
            process.send_signal(signum)

        previous = signal.signal(signal.SIGTERM, _forward)
        try:
            while True:
                try:
                    return process.wait()
                except KeyboardInterrupt:
                    continue
        finally:
            _ = signal.signal(signal.SIGTERM, previous)

    def spawn_detached(
        self, command: Sequence[str], *, cwd: Path, console_log: Path
    ) -> int:
        """Launch the server in a new session and return its pid.

        The server reads from /dev/null and appends stdout and stderr to
        the console log. It does not wait for the server.

        Args:
            command: Executable and arguments.
            cwd: Working directory for the server.
            console_log: File that receives the server's output.

        Returns:
            The pid of the launched process.
        """
        with console_log.open("ab") as log_handle:
            process = subprocess.Popen(  # noqa: S603
                list(command),
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=log_handle,
                stderr=subprocess.STDOUT,
                start_new_session=True,
                close_fds=True,
            )
        return process.pid
