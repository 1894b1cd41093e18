"""Utilities used by the warden CLI."""

from ._app import create_app, main
from ._context import CLIContext, load_context
from ._shared import USAGE, ExitCode, exit_with_error

__all__ = [
    "USAGE",
    "CLIContext",
    "ExitCode",
    "create_app",
    "exit_with_error",
    "load_context",
    "main",
]
