"""Lifecycle controller for the supervised server.

This module provides the LifecycleController class that implements the
console, start, stop, status and restart operations on top of the pidfile
and the timeout-bounded polling loops.
"""

import os
import signal
import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, final

from warden.exceptions import (
    AlreadyRunningError,
    PidfileError,
    ServiceStartError,
    ServiceStopError,
)
from warden.utils import create_null_logger

from ._launcher import SubprocessLauncher
from ._models import LifecycleTimeouts, ProcessRecord, ServicePaths, ServiceState
from ._output import ConsoleReporter
from ._pidfile import probe, remove_pidfile, write_pid

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ._protocol import Launcher, Reporter

StartedCallback = Callable[[ProcessRecord], None]

# A launch command, or a function producing one when a launch is needed
LaunchCommand = Sequence[str] | Callable[[], Sequence[str]]


def _resolve_command(command: LaunchCommand) -> list[str]:
    if callable(command):
        return list(command())
    return list(command)


@final
class LifecycleController:
    """Controls the lifecycle of one server instance.

    Every operation re-probes the pidfile; nothing about the process is
    cached between calls or between polling iterations. Polling loops
    sleep in whole seconds and measure elapsed time in whole seconds.

    Attributes:
        paths: Filesystem locations of the service.
        timeouts: Polling budgets for start and stop.
    """

    __slots__ = (
        "_clock",
        "_launcher",
        "_logger",
        "_on_started",
        "_reporter",
        "_send_signal",
        "_sleep",
        "paths",
        "timeouts",
    )

    def __init__(  # noqa: PLR0913
        self,
        paths: ServicePaths,
        *,
        timeouts: LifecycleTimeouts | None = None,
        launcher: "Launcher | None" = None,  # noqa: UP037
        reporter: "Reporter | None" = None,  # noqa: UP037
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
        on_started: StartedCallback | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        send_signal: Callable[[int, int], None] = os.kill,
    ) -> None:
        """Initialize the controller.

        Args:
            paths: Filesystem locations of the service.
            timeouts: Polling budgets. Defaults to LifecycleTimeouts().
            launcher: Process launcher. Defaults to SubprocessLauncher.
            reporter: Operator output. Defaults to ConsoleReporter.
            logger: Structured logger. Defaults to a null logger.
            on_started: Called once with the live record after a confirmed
                detached start. Defaults to a one-line message.
            sleep: Sleep function used by the polling loops.
            clock: Monotonic clock used to measure elapsed time.
            send_signal: Function used to deliver the termination signal.
        """
        self.paths = paths
        self.timeouts = timeouts or LifecycleTimeouts()
        self._launcher: Launcher = launcher or SubprocessLauncher()
        self._reporter: Reporter = reporter or ConsoleReporter()
        self._logger: FilteringBoundLogger = logger or create_null_logger()
        self._on_started: StartedCallback = on_started or self._default_started
        self._sleep = sleep
        self._clock = clock
        self._send_signal = send_signal

    @property
    def service(self) -> str:
        """Return the service name."""
        return self.paths.service

    def _default_started(self, record: ProcessRecord) -> None:
        self._reporter.message(f"Started {self.service} (pid {record.pid}).")

    def _elapsed(self, since: float) -> int:
        return int(self._clock() - since)

    def _prepare_log_dir(self) -> None:
        try:
            self.paths.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            reason = e.strerror or e
            msg = f"Cannot create log directory {self.paths.log_dir}: {reason}"
            raise ServiceStartError(msg, service_name=self.service, cause=e) from e

    def status(self) -> ProcessRecord:
        """Return a fresh liveness record for the service.

        Returns:
            The current ProcessRecord. Never cached.
        """
        return probe(self.paths.pidfile)

    def console(self, command: LaunchCommand) -> int:
        """Run the server in the foreground.

        No pidfile is written and the server keeps the terminal's standard
        streams. Blocks until the server exits.

        Args:
            command: Launch command for the server, or a function producing
                it. The function is only called when a launch is needed.

        Returns:
            The server's exit code.

        Raises:
            AlreadyRunningError: If a detached instance is live.
            ServiceStartError: If the log directory cannot be created or the
                process cannot be launched.
        """
        record = self.status()
        if record.live:
            msg = f"{self.service} is already running (pid {record.pid})."
            raise AlreadyRunningError(
                msg,
                service_name=self.service,
                pid=record.pid,
                console_log=self.paths.console_log,
            )

        argv = _resolve_command(command)
        self._prepare_log_dir()
        self._reporter.message(f"Starting {self.service}.")
        self._logger.info(
            "service_launch",
            mode="foreground",
            state=ServiceState.STARTING,
            command=argv,
        )

        try:
            exit_code = self._launcher.run_foreground(
                argv, cwd=self.paths.install_root
            )
        except OSError as e:
            msg = f"Failed to launch {self.service}: {e}"
            raise ServiceStartError(msg, service_name=self.service, cause=e) from e

        self._logger.info("service_exited", mode="foreground", exit_code=exit_code)
        return exit_code

    def start(self, command: LaunchCommand) -> ProcessRecord:
        """Start the server detached and wait until it is live.

        Starting a live service is a successful no-op.

        Args:
            command: Launch command for the server, or a function producing
                it. The function is only called when a launch is needed.

        Returns:
            The live ProcessRecord.

        Raises:
            ServiceStartError: If the log directory cannot be created, the
                process cannot be launched, or it is not confirmed live
                within the start-wait timeout. A pidfile written for the
                launch is removed.
            PidfileError: If the pidfile cannot be read or written. A server
                launched without a recorded pid is sent SIGTERM.
        """
        record = self.status()
        if record.live:
            self._reporter.message(
                f"{self.service} is already running (pid {record.pid})."
            )
            return record
        if record.stale:
            self._logger.info("stale_pidfile_replaced", pid=record.pid)

        argv = _resolve_command(command)
        self._prepare_log_dir()
        self._reporter.message(f"Starting {self.service}.")

        try:
            pid = self._launcher.spawn_detached(
                argv,
                cwd=self.paths.install_root,
                console_log=self.paths.console_log,
            )
        except OSError as e:
            msg = f"Unable to start. See {self.paths.console_log} for details."
            raise ServiceStartError(
                msg,
                service_name=self.service,
                console_log=self.paths.console_log,
                cause=e,
            ) from e

        try:
            write_pid(self.paths.pidfile, pid)
        except PidfileError:
            # An unrecorded server could never be stopped
            self._terminate(pid)
            raise
        self._logger.info(
            "service_launch",
            mode="detached",
            state=ServiceState.STARTING,
            pid=pid,
            command=argv,
        )

        started_at = self._clock()
        while True:
            record = self.status()
            if record.live:
                break
            if self._elapsed(started_at) >= self.timeouts.start_wait:
                remove_pidfile(self.paths.pidfile)
                self._logger.error(
                    "service_start_timeout",
                    pid=pid,
                    start_wait=self.timeouts.start_wait,
                )
                msg = f"Unable to start. See {self.paths.console_log} for details."
                raise ServiceStartError(
                    msg,
                    service_name=self.service,
                    pid=pid,
                    console_log=self.paths.console_log,
                )
            self._sleep(1)

        self._logger.info("service_started", state=ServiceState.RUNNING, pid=pid)
        self._on_started(record)
        return record

    def _terminate(self, pid: int) -> None:
        try:
            self._send_signal(pid, signal.SIGTERM)
        except ProcessLookupError:
            pass
        except PermissionError as e:
            self._logger.warning("service_signal_denied", pid=pid, error=str(e))

    def stop(self) -> None:
        """Stop the server, resending SIGTERM once per second.

        Stopping a service that is not live removes any stale pidfile and
        succeeds.

        Raises:
            ServiceStopError: If the server is still live when the shutdown
                timeout elapses. The pidfile is left in place.
            PidfileError: If the pidfile cannot be read or removed.
        """
        record = self.status()
        if not record.live:
            if remove_pidfile(self.paths.pidfile):
                self._logger.info("stale_pidfile_removed", pid=record.pid)
            self._reporter.message(f"{self.service} not running")
            return

        pid = record.pid
        self._reporter.progress(f"Stopping {self.service}.")
        self._logger.info(
            "service_stop_requested",
            state=ServiceState.STOPPING,
            pid=pid,
            shutdown_timeout=self.timeouts.shutdown,
        )

        started_at = self._clock()
        while True:
            record = self.status()
            if not record.live or record.pid is None:
                remove_pidfile(self.paths.pidfile)
                self._reporter.message(" stopped")
                self._logger.info(
                    "service_stopped", state=ServiceState.STOPPED, pid=pid
                )
                return

            pid = record.pid
            self._terminate(pid)

            if self._elapsed(started_at) >= self.timeouts.shutdown:
                self._reporter.message(" failed to stop")
                self._logger.error(
                    "service_stop_timeout",
                    pid=pid,
                    shutdown_timeout=self.timeouts.shutdown,
                )
                msg = (
                    f"{self.service} (pid {pid}) took more than "
                    f"{self.timeouts.shutdown} seconds to stop. "
                    f"Please see {self.paths.console_log} for details."
                )
                raise ServiceStopError(
                    msg,
                    service_name=self.service,
                    pid=pid,
                    console_log=self.paths.console_log,
                    timeout=self.timeouts.shutdown,
                )

            self._reporter.progress(".")
            self._sleep(1)

    def restart(self, command: LaunchCommand) -> ProcessRecord:
        """Stop the server, then start it.

        A failed stop is reported and start is attempted anyway. If the old
        instance is still live, start sees it and does nothing.

        Args:
            command: Launch command for the server, or a function producing
                it. The function is only called when a launch is needed.

        Returns:
            The ProcessRecord returned by start.

        Raises:
            ServiceStartError: If the start step fails.
        """
        try:
            self.stop()
        except ServiceStopError as e:
            self._reporter.error(str(e))
            self._logger.warning("restart_stop_failed", pid=e.pid)
        return self.start(command)
