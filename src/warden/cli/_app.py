"""The command-line interface for warden."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, CycloptsError, Parameter
from rich.console import Console

from ._commands import register_commands
from ._context import CLIContext, load_context
from ._shared import ExitCode

APP_HELP = "Supervise a single long-running server process."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
) -> App:
    """Create the warden CLI application.

    The returned app's meta entry point resolves configuration once and
    publishes it as the current CLIContext before dispatching a command.
    Argument errors are printed and exit with ExitCode.ERROR.

    Args:
        console: Console for normal output.
        error_console: Console for error output.

    Returns:
        The configured cyclopts App. Invoke it through `app.meta`.
    """
    if console is None:
        console = Console(highlight=False)
    if error_console is None:
        error_console = Console(stderr=True, highlight=False)
    app = App(
        name="warden",
        help=APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=False,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[
            bool, Parameter(help="Log controller activity at debug level")
        ] = False,
        home: Annotated[
            Path | None,
            Parameter(name="--home", help="Server install root (or WARDEN_HOME)"),
        ] = None,
    ) -> None:
        """Launch warden with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Log controller activity at debug level.
            home: Server install root.
        """
        ctx = load_context(
            home=home,
            verbose=verbose,
            console=console,
            error_console=error_console,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        except CycloptsError as e:
            raise SystemExit(ExitCode.ERROR) from e
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `warden` CLI."""
    app = create_app()
    try:
        app.meta()
    except CycloptsError as e:
        raise SystemExit(ExitCode.ERROR) from e
