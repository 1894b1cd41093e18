"""Supervisor package for controlling a single server process.

This package tracks a detached server through a pidfile and implements
the lifecycle operations on top of it.

Key Components:
    - ServicePaths: Filesystem locations derived from configuration
    - ProcessRecord: Liveness snapshot read from the pidfile
    - LifecycleTimeouts: Start and shutdown polling budgets
    - ServiceState: Transient lifecycle states
    - Launcher / Reporter: Protocols for process creation and output
    - SubprocessLauncher: Foreground and detached process launching
    - ConsoleReporter: Rich terminal output
    - LifecycleController: console, start, stop, status and restart

Example:
    >>> from warden.supervisor import LifecycleController, resolve_paths
    >>> paths = resolve_paths(Path("/opt/server"), config)
    >>> controller = LifecycleController(paths)
    >>> controller.start(["java", "-cp", "lib/*", "server.Main"])
    >>> controller.status().live
    True
"""

from ._controller import LaunchCommand, LifecycleController, StartedCallback
from ._launcher import SubprocessLauncher
from ._models import (
    ARBITER_SHUTDOWN_TIMEOUT,
    DEFAULT_SHUTDOWN_TIMEOUT,
    DEFAULT_START_WAIT,
    LifecycleTimeouts,
    ProcessRecord,
    ServicePaths,
    ServiceState,
    is_arbiter,
)
from ._output import ConsoleReporter
from ._paths import resolve_config_dir, resolve_paths
from ._pidfile import is_process_alive, probe, read_pid, remove_pidfile, write_pid
from ._protocol import Launcher, Reporter

__all__ = [
    "ARBITER_SHUTDOWN_TIMEOUT",
    "DEFAULT_SHUTDOWN_TIMEOUT",
    "DEFAULT_START_WAIT",
    "ConsoleReporter",
    "LaunchCommand",
    "Launcher",
    "LifecycleController",
    "LifecycleTimeouts",
    "ProcessRecord",
    "Reporter",
    "ServicePaths",
    "ServiceState",
    "StartedCallback",
    "SubprocessLauncher",
    "is_arbiter",
    "is_process_alive",
    "probe",
    "read_pid",
    "remove_pidfile",
    "resolve_config_dir",
    "resolve_paths",
    "write_pid",
]
