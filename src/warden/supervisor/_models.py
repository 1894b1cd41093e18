"""Data models for the supervisor system.

This module defines the core data types for service lifecycle control:
- ServiceState: Transient lifecycle states inferred during an operation
- ServicePaths: Well-known filesystem locations of the service
- ProcessRecord: Liveness snapshot derived from the pidfile
- LifecycleTimeouts: Polling budgets for start and stop
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from warden.config import EnvironmentOverrides, ResolvedConfig

DEFAULT_SHUTDOWN_TIMEOUT = 120
"""Seconds to wait for the server to stop."""

ARBITER_SHUTDOWN_TIMEOUT = 20
"""Seconds to wait for the lightweight arbiter variant to stop."""

DEFAULT_START_WAIT = 5
"""Seconds to wait for a detached launch to be confirmed live."""


class ServiceState(StrEnum):
    """Service lifecycle states.

    States are never persisted. Each operation infers them from repeated
    pidfile probes:
    - STOPPED: No live process record
    - STARTING: Launch issued, liveness not yet confirmed
    - RUNNING: Live process record confirmed
    - STOPPING: Termination requested, liveness not yet disproved
    """

    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"


@dataclass(frozen=True, slots=True)
class ServicePaths:
    """Filesystem locations used by the controller.

    Attributes:
        service: Service name, used as the stem of the pidfile and console log.
        install_root: Root directory of the server installation.
        config_dir: Directory holding the configuration sources.
        log_dir: Directory for log files.
        run_dir: Directory holding the pidfile.
        pidfile: File recording the pid of the detached server.
        console_log: File receiving the detached server's output.
        controller_log: Structured log of controller operations.
    """

    service: str
    install_root: Path
    config_dir: Path
    log_dir: Path
    run_dir: Path
    pidfile: Path
    console_log: Path
    controller_log: Path


@dataclass(frozen=True, slots=True)
class ProcessRecord:
    """Snapshot of what the pidfile says about the service.

    A record is live only when the pidfile exists and its pid answers the
    liveness probe. A stale record keeps the pid for diagnostics.

    Attributes:
        pid: Process ID read from the pidfile, if any.
        live: Whether the process answered the liveness probe.
    """

    pid: int | None = None
    live: bool = False

    @property
    def stale(self) -> bool:
        """Whether a pid was recorded but the process is gone."""
        return self.pid is not None and not self.live


@dataclass(frozen=True, slots=True)
class LifecycleTimeouts:
    """Polling budgets for lifecycle operations, in whole seconds.

    Attributes:
        shutdown: Seconds to wait for the server to exit after termination
            is requested.
        start_wait: Seconds to wait for a detached launch to be live.
    """

    shutdown: int = DEFAULT_SHUTDOWN_TIMEOUT
    start_wait: int = DEFAULT_START_WAIT

    @classmethod
    def from_config(
        cls,
        config: "ResolvedConfig",
        overrides: "EnvironmentOverrides | None" = None,
    ) -> "LifecycleTimeouts":  # noqa: UP037
        """Derive timeouts from configuration and environment overrides.

        The arbiter variant (`dbms_mode=ARBITER`) uses a shorter shutdown
        timeout. Environment overrides win over both defaults.

        Args:
            config: Resolved file configuration.
            overrides: Environment overrides, if any.

        Returns:
            The timeouts for this invocation.
        """
        shutdown = (
            ARBITER_SHUTDOWN_TIMEOUT
            if is_arbiter(config)
            else DEFAULT_SHUTDOWN_TIMEOUT
        )
        start_wait = DEFAULT_START_WAIT

        if overrides is not None:
            if overrides.shutdown_timeout is not None:
                shutdown = overrides.shutdown_timeout
            if overrides.start_wait is not None:
                start_wait = overrides.start_wait

        return cls(shutdown=shutdown, start_wait=start_wait)


def is_arbiter(config: "ResolvedConfig") -> bool:
    """Whether the configuration selects the lightweight arbiter variant."""
    return config.get("dbms_mode", "").strip().upper() == "ARBITER"
