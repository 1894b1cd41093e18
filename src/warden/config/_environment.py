"""Environment variable overrides.

This module provides the EnvironmentOverrides Pydantic model, the typed view
over the environment knobs that take precedence over file configuration.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError

from warden.exceptions import ConfigValidationError

# Field name -> environment variable
ENVIRONMENT_VARIABLES: dict[str, str] = {
    "home": "WARDEN_HOME",
    "conf_dir": "WARDEN_CONF",
    "log_dir": "WARDEN_LOGS",
    "pidfile": "WARDEN_PIDFILE",
    "start_wait": "WARDEN_START_WAIT",
    "shutdown_timeout": "WARDEN_SHUTDOWN_TIMEOUT",
    "java_cmd": "JAVA_CMD",
    "java_home": "JAVA_HOME",
}


class EnvironmentOverrides(BaseModel):
    """Values read from the process environment.

    Every field is optional; unset fields fall back to file configuration
    or built-in defaults.

    Attributes:
        home: Install root of the server.
        conf_dir: Directory holding the configuration sources.
        log_dir: Directory for the console log and controller log.
        pidfile: Explicit pidfile location.
        start_wait: Seconds to wait for a detached start to be confirmed.
        shutdown_timeout: Seconds to wait for the server to stop.
        java_cmd: Explicit runtime executable.
        java_home: Runtime home directory containing `bin/java`.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    home: Path | None = None
    conf_dir: Path | None = None
    log_dir: Path | None = None
    pidfile: Path | None = None
    start_wait: PositiveInt | None = None
    shutdown_timeout: PositiveInt | None = None
    java_cmd: Path | None = None
    java_home: Path | None = None

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None
    ) -> "EnvironmentOverrides":  # noqa: UP037
        """Build overrides from an environment mapping.

        Empty variables are treated as unset.

        Args:
            environ: Environment to read. Defaults to os.environ.

        Returns:
            The validated overrides.

        Raises:
            ConfigValidationError: If a variable has an invalid value.
        """
        source = os.environ if environ is None else environ
        data = {
            field: source[variable]
            for field, variable in ENVIRONMENT_VARIABLES.items()
            if source.get(variable)
        }

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0])
            variable = ENVIRONMENT_VARIABLES.get(field, field)
            msg = f"Invalid value for {variable}: {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=variable,
                value=data.get(field),
                expected=error["type"],
            ) from e

    def install_root(self) -> Path:
        """Return the install root, defaulting to the working directory."""
        return self.home if self.home is not None else Path.cwd()
