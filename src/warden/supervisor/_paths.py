"""Service path resolution.

Derives the well-known filesystem locations of the service from the
install root, the resolved configuration and environment overrides. Only
path strings are built here; directories are created by the controller
when it needs them.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from warden.config import DEFAULT_SERVICE_NAME

from ._models import ServicePaths

if TYPE_CHECKING:
    from warden.config import EnvironmentOverrides, ResolvedConfig

CONTROLLER_LOG_NAME = "warden.log"


def resolve_config_dir(
    install_root: Path, overrides: "EnvironmentOverrides | None" = None
) -> Path:
    """Resolve the configuration directory.

    The config directory must be known before configuration is loaded, so
    only the environment can override it.

    Args:
        install_root: Root directory of the server installation.
        overrides: Environment overrides, if any.

    Returns:
        `overrides.conf_dir` if set, else `<root>/conf`.
    """
    if overrides is not None and overrides.conf_dir is not None:
        return overrides.conf_dir
    return install_root / "conf"


def resolve_paths(
    install_root: Path,
    config: "ResolvedConfig",
    overrides: "EnvironmentOverrides | None" = None,
    *,
    service: str = DEFAULT_SERVICE_NAME,
) -> ServicePaths:
    """Resolve all service paths.

    Resolution rules:
        - config dir: environment, else `<root>/conf`
        - log dir: environment, else `dbms_directories_logs`, else
          `<root>/data/log`
        - run dir: `<root>/<dbms_directories_run or "run">`
        - pidfile: environment, else `<run dir>/<service>.pid`
        - console log: `<log dir>/<service>.log`

    Relative configuration values resolve against the install root.

    Args:
        install_root: Root directory of the server installation.
        config: Resolved file configuration.
        overrides: Environment overrides, if any.
        service: Service name used for the pidfile and console log.

    Returns:
        The resolved ServicePaths.
    """
    config_dir = resolve_config_dir(install_root, overrides)

    if overrides is not None and overrides.log_dir is not None:
        log_dir = overrides.log_dir
    else:
        log_dir = config.get_path("dbms_directories_logs", install_root, "data/log")

    run_dir = config.get_path("dbms_directories_run", install_root, "run")

    if overrides is not None and overrides.pidfile is not None:
        pidfile = overrides.pidfile
    else:
        pidfile = run_dir / f"{service}.pid"

    return ServicePaths(
        service=service,
        install_root=install_root,
        config_dir=config_dir,
        log_dir=log_dir,
        run_dir=run_dir,
        pidfile=pidfile,
        console_log=log_dir / f"{service}.log",
        controller_log=log_dir / CONTROLLER_LOG_NAME,
    )
