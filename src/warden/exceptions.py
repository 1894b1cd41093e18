"""Warden exceptions."""

from pathlib import Path


class WardenError(Exception):
    """Base exception for warden errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(WardenError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when a configuration source exists but cannot be read."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with the source that could not be read."""
        super().__init__(message)
        self.path: Path | None = path


class ConfigValidationError(ConfigError):
    """Raised when an environment override or a configured value is invalid."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: object,
        expected: str,
    ) -> None:
        """Initialize with the variable, its raw value and the failed check."""
        super().__init__(message)
        self.key: str = key
        self.value: object = value
        self.expected: str = expected


# =============================================================================
# Runtime Environment Exceptions
# =============================================================================


class RuntimeEnvironmentError(WardenError):
    """Base exception for problems with the server's language runtime.

    Attributes:
        remedy: Guidance for the operator on how to fix the environment.
    """

    def __init__(self, message: str, *, remedy: str | None = None) -> None:
        """Initialize with error message and remediation guidance."""
        super().__init__(message)
        self.remedy: str | None = remedy


class RuntimeNotFoundError(RuntimeEnvironmentError):
    """Raised when no usable runtime executable can be located."""


class UnsupportedRuntimeError(RuntimeEnvironmentError):
    """Raised when the runtime executable reports an unsupported version.

    Attributes:
        version: The version string reported by the runtime, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        version: str | None = None,
        remedy: str | None = None,
    ) -> None:
        """Initialize with error message and version context."""
        super().__init__(message, remedy=remedy)
        self.version: str | None = version


# =============================================================================
# Supervisor Exceptions
# =============================================================================


class SupervisorError(WardenError):
    """Base exception for service lifecycle errors.

    Attributes:
        service_name: The name of the supervised service.
        pid: Process ID involved in the failure, if known.
        console_log: Console log to consult for details, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        service_name: str | None = None,
        pid: int | None = None,
        console_log: Path | None = None,
    ) -> None:
        """Initialize with error message and service context.

        Args:
            message: Human-readable error message.
            service_name: The name of the supervised service.
            pid: Process ID involved in the failure.
            console_log: Console log file with the server's output.
        """
        super().__init__(message)
        self.service_name: str | None = service_name
        self.pid: int | None = pid
        self.console_log: Path | None = console_log


class PidfileError(SupervisorError):
    """Raised when the pidfile exists but cannot be read, written or removed.

    Attributes:
        pidfile: The pidfile that could not be accessed.
    """

    def __init__(
        self,
        message: str,
        *,
        pidfile: Path,
        pid: int | None = None,
    ) -> None:
        """Initialize with error message and the pidfile involved."""
        super().__init__(message, pid=pid)
        self.pidfile: Path = pidfile


class AlreadyRunningError(SupervisorError):
    """Raised when a foreground run is requested while an instance is live."""


class ServiceStartError(SupervisorError):
    """Raised when a launched service is not confirmed live in time.

    Attributes:
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        service_name: str | None = None,
        pid: int | None = None,
        console_log: Path | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and launch context."""
        super().__init__(
            message, service_name=service_name, pid=pid, console_log=console_log
        )
        self.cause: Exception | None = cause


class ServiceStopError(SupervisorError):
    """Raised when a service outlives the shutdown timeout.

    Attributes:
        timeout: The shutdown timeout in seconds that elapsed.
    """

    def __init__(
        self,
        message: str,
        *,
        service_name: str | None = None,
        pid: int | None = None,
        console_log: Path | None = None,
        timeout: int | None = None,
    ) -> None:
        """Initialize with error message and shutdown context."""
        super().__init__(
            message, service_name=service_name, pid=pid, console_log=console_log
        )
        self.timeout: int | None = timeout
