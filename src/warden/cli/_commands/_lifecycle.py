"""Lifecycle commands: console, start, stop, restart and status.

Each command resolves the invocation state from the current CLIContext,
builds a LifecycleController and maps its outcome to an exit code.
"""

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from typing import Never

from rich.text import Text

from warden.exceptions import (
    ConfigValidationError,
    RuntimeEnvironmentError,
    SupervisorError,
)
from warden.runtime import build_command, check_java, find_java, start_message
from warden.supervisor import ConsoleReporter, LifecycleController, ProcessRecord
from warden.utils import controller_logger

from .._context import CLIContext
from .._shared import ExitCode, exit_with_error

UNSUPPORTED_RUNTIME_WARNING = "WARNING! You are using an unsupported Java runtime."
CONTROLLER_LOG_WARNING = "WARNING! Cannot write the controller log"


@contextmanager
def _controller(
    ctx: CLIContext, *, command: str, log: bool = True
) -> Iterator[LifecycleController]:
    """Build a controller for one command, closing its log afterwards.

    An unwritable controller log is reported as a warning and the command
    runs without it.
    """
    reporter = ConsoleReporter(ctx.console, ctx.error_console)

    def _on_started(record: ProcessRecord) -> None:
        reporter.message(start_message(record, ctx.config, ctx.paths))

    with ExitStack() as stack:
        logger = None
        if log:
            try:
                logger = stack.enter_context(
                    controller_logger(
                        ctx.paths.controller_log,
                        level="debug" if ctx.verbose else None,
                        command=command,
                    )
                )
            except OSError as e:
                ctx.error_console.print(
                    Text(
                        f"{CONTROLLER_LOG_WARNING} {ctx.paths.controller_log}: "
                        f"{e.strerror or e}"
                    ),
                    soft_wrap=True,
                )

        yield LifecycleController(
            ctx.paths,
            timeouts=ctx.timeouts,
            reporter=reporter,
            logger=logger,
            on_started=_on_started,
        )


def _launch_command(ctx: CLIContext) -> list[str]:
    """Locate and validate the runtime, then build the launch command.

    Raises:
        SystemExit: With ExitCode.ERROR if the runtime is missing or
            unsupported, or a configured flag string cannot be split.
    """
    try:
        runtime = check_java(find_java(ctx.overrides))
    except RuntimeEnvironmentError as e:
        message = f"{e}\n{e.remedy}" if e.remedy else str(e)
        exit_with_error(message, console=ctx.error_console)

    if not runtime.supported_vendor:
        ctx.error_console.print(
            UNSUPPORTED_RUNTIME_WARNING, highlight=False, soft_wrap=True
        )

    try:
        return build_command(runtime.executable, ctx.config, ctx.paths)
    except ConfigValidationError as e:
        exit_with_error(str(e), console=ctx.error_console)


def console() -> Never:
    """Run the server in the foreground, attached to this terminal."""
    ctx = CLIContext.get_current()

    with _controller(ctx, command="console") as controller:
        try:
            exit_code = controller.console(lambda: _launch_command(ctx))
        except SupervisorError as e:
            exit_with_error(str(e), console=ctx.error_console)

    # Killed by a signal: report it the way a shell would
    raise SystemExit(128 - exit_code if exit_code < 0 else exit_code)


def start() -> None:
    """Start the server as a daemon and wait until its process is live."""
    ctx = CLIContext.get_current()

    with _controller(ctx, command="start") as controller:
        try:
            _ = controller.start(lambda: _launch_command(ctx))
        except SupervisorError as e:
            exit_with_error(str(e), console=ctx.error_console)


def stop() -> None:
    """Stop the daemonized server."""
    ctx = CLIContext.get_current()

    with _controller(ctx, command="stop") as controller:
        try:
            controller.stop()
        except SupervisorError as e:
            exit_with_error(str(e), console=ctx.error_console)


def restart() -> None:
    """Stop the server, then start it again.

    Start is attempted even when stop times out.
    """
    ctx = CLIContext.get_current()

    with _controller(ctx, command="restart") as controller:
        try:
            _ = controller.restart(lambda: _launch_command(ctx))
        except SupervisorError as e:
            exit_with_error(str(e), console=ctx.error_console)


def status() -> None:
    """Report whether the server is running.

    Exits with 3 when the server is not running, and with 1 when the pidfile
    cannot be read.
    """
    ctx = CLIContext.get_current()

    with _controller(ctx, command="status", log=False) as controller:
        try:
            record = controller.status()
        except SupervisorError as e:
            exit_with_error(str(e), console=ctx.error_console)

    service = ctx.paths.service
    if record.live:
        ctx.console.print(
            Text(f"{service} is running at pid {record.pid}"), soft_wrap=True
        )
        return

    ctx.console.print(Text(f"{service} is not running"), soft_wrap=True)
    raise SystemExit(ExitCode.NOT_RUNNING)
