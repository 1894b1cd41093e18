# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""Per-invocation state shared by the commands.

The meta entry point resolves environment overrides, configuration and
paths once, then publishes them as the current CLIContext for the duration
of the command.
"""

import contextvars
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from warden.config import (
    EnvironmentOverrides,
    ResolvedConfig,
    config_sources,
    load_config,
)
from warden.exceptions import ConfigError
from warden.supervisor import (
    LifecycleTimeouts,
    ServicePaths,
    resolve_config_dir,
    resolve_paths,
)

from ._shared import exit_with_error

_current_cli_context: contextvars.ContextVar["CLIContext | None"] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with resolved configuration and options.

    Attributes:
        overrides: Environment overrides read at startup.
        config: Configuration merged from the config directory.
        paths: Service paths derived from the install root and configuration.
        timeouts: Start and shutdown polling budgets.
        verbose: Log at debug level.
        console: Console for normal output.
        error_console: Console for error output.
    """

    overrides: EnvironmentOverrides
    config: ResolvedConfig = field(repr=False)
    paths: ServicePaths
    timeouts: LifecycleTimeouts
    verbose: bool = False
    console: Console = field(default_factory=Console, repr=False)
    error_console: Console = field(
        default_factory=lambda: Console(stderr=True), repr=False
    )

    @classmethod
    def get_current(cls) -> "CLIContext":  # noqa: UP037
        """Get current active CLIContext, or load one from the environment.

        Returns:
            The currently active CLIContext.
        """
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return load_context()

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:  # noqa: UP037
        """Publish ctx for the running command."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Forget the published context."""
        _current_cli_context.set(None)


def load_context(
    *,
    home: Path | None = None,
    verbose: bool = False,
    console: Console | None = None,
    error_console: Console | None = None,
) -> CLIContext:
    """Resolve the invocation state, exiting on configuration errors.

    Args:
        home: Install root override (--home flag). Wins over WARDEN_HOME.
        verbose: Log at debug level.
        console: Console for normal output.
        error_console: Console for error output.

    Returns:
        The resolved CLIContext.

    Raises:
        SystemExit: With ExitCode.ERROR if an environment variable is invalid
            or a configuration file cannot be read.
    """
    console = console or Console(highlight=False)
    error_console = error_console or Console(stderr=True, highlight=False)

    try:
        overrides = EnvironmentOverrides.from_environ()
        install_root = (home or overrides.install_root()).absolute()
        config_dir = resolve_config_dir(install_root, overrides)
        config = load_config(config_sources(config_dir))
    except ConfigError as e:
        exit_with_error(str(e), console=error_console)

    return CLIContext(
        overrides=overrides,
        config=config,
        paths=resolve_paths(install_root, config, overrides),
        timeouts=LifecycleTimeouts.from_config(config, overrides),
        verbose=verbose,
        console=console,
        error_console=error_console,
    )
