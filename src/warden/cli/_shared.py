"""Exit codes, usage text and error reporting shared by the commands."""

from enum import IntEnum
from typing import Never

from rich.console import Console
from rich.text import Text

__all__ = [
    "USAGE",
    "ExitCode",
    "exit_with_error",
    "get_error_console",
]

USAGE = "Usage: warden { console | start | stop | restart | status | version }"


class ExitCode(IntEnum):
    """Process exit statuses.

    NOT_RUNNING is only used by `status`, which lets init scripts tell a
    stopped server apart from a failed command.
    """

    SUCCESS = 0
    ERROR = 1
    NOT_RUNNING = 3


def get_error_console() -> Console:
    """Return a stderr console without syntax highlighting."""
    return Console(stderr=True, highlight=False)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Report a failure on stderr and terminate the command.

    The message is printed literally, so paths containing brackets are not
    read as markup.

    Args:
        message: What went wrong, as shown to the operator.
        code: Exit status. Defaults to ExitCode.ERROR.
        console: Console to print on. Defaults to a fresh stderr console.

    Raises:
        SystemExit: Always.
    """
    out = console if console is not None else get_error_console()
    out.print(Text.assemble(("Error:", "red"), " ", message), soft_wrap=True)
    raise SystemExit(code)
