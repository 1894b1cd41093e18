"""Warden CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from warden.utils import get_package_version

from .._context import CLIContext
from .._shared import USAGE, ExitCode
from ._lifecycle import console, restart, start, status, stop

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "console",
    "register_commands",
    "restart",
    "start",
    "status",
    "stop",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.command(console, name="console")
    app.command(start, name="start")
    app.command(stop, name="stop")
    app.command(restart, name="restart")
    app.command(status, name="status")

    @app.command(name="version")
    def _version() -> None:  # pyright: ignore[reportUnusedFunction]
        """Show warden's version."""
        CLIContext.get_current().console.print(get_package_version(), soft_wrap=True)

    @app.default
    def _usage() -> None:  # pyright: ignore[reportUnusedFunction]
        """Print usage when no command is given."""
        CLIContext.get_current().error_console.print(
            USAGE, highlight=False, markup=False, soft_wrap=True
        )
        raise SystemExit(ExitCode.ERROR)
