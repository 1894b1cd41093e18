"""Startup argument derivation for the server JVM.

Translates resolved configuration into the command line handed to the
launcher: memory and diagnostic flags, the classpath, and the entry point.
"""

import os
import shlex
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations
from typing import TYPE_CHECKING

from warden.exceptions import ConfigValidationError
from warden.supervisor import is_arbiter

if TYPE_CHECKING:
    from warden.config import ResolvedConfig
    from warden.supervisor import ServicePaths

SERVER_ENTRY_POINT = "org.warden.server.ServerEntryPoint"
ARBITER_ENTRY_POINT = "org.warden.server.ArbiterEntryPoint"

DEFAULT_GC_OPTIONS = (
    "-XX:+PrintGCDetails -XX:+PrintGCDateStamps -XX:+PrintGCApplicationStoppedTime "
    "-XX:+PrintPromotionFailure -XX:+PrintTenuringDistribution"
)
DEFAULT_GC_ROTATION_KEEP = "5"
DEFAULT_GC_ROTATION_SIZE = "20m"


def split_flags(key: str, value: str) -> list[str]:
    """Split a configured flag string shell-style.

    Raises:
        ConfigValidationError: If the value has unbalanced quotes.
    """
    try:
        return shlex.split(value)
    except ValueError as e:
        msg = f"Invalid value for {key}: {e}"
        raise ConfigValidationError(
            msg, key=key, value=value, expected="balanced shell quoting"
        ) from e


def heap_size(value: str) -> str:
    """Normalize a heap size; a bare number means megabytes."""
    value = value.strip()
    return f"{value}m" if value.isdigit() else value


def gc_log_options(config: "ResolvedConfig", log_dir: Path) -> list[str]:
    """Build garbage collection logging flags.

    Args:
        config: Resolved configuration.
        log_dir: Directory that receives gc.log.

    Returns:
        The flags, or an empty list unless `dbms_logs_gc_enabled` is true.
    """
    if not config.get_bool("dbms_logs_gc_enabled"):
        return []

    return [
        f"-Xloggc:{log_dir / 'gc.log'}",
        "-XX:+UseGCLogFileRotation",
        "-XX:NumberOfGCLogFiles="
        + config.get("dbms_logs_gc_rotation_keep_number", DEFAULT_GC_ROTATION_KEEP),
        "-XX:GCLogFileSize="
        + config.get("dbms_logs_gc_rotation_size", DEFAULT_GC_ROTATION_SIZE),
        *split_flags(
            "dbms_logs_gc_options",
            config.get("dbms_logs_gc_options", DEFAULT_GC_OPTIONS),
        ),
    ]


def jvm_options(config: "ResolvedConfig", paths: "ServicePaths") -> list[str]:
    """Derive JVM flags from configuration.

    Args:
        config: Resolved configuration.
        paths: Resolved service paths.

    Returns:
        Flags in launch order, ending with the file encoding.
    """
    options = ["-server"]

    initial = config.get("dbms_memory_heap_initial_size")
    if initial is not None:
        options.append(f"-Xms{heap_size(initial)}")

    maximum = config.get("dbms_memory_heap_max_size")
    if maximum is not None:
        options.append(f"-Xmx{heap_size(maximum)}")

    options.extend(gc_log_options(config, paths.log_dir))

    additional = config.get("dbms_jvm_additional")
    if additional is not None:
        options.extend(split_flags("dbms_jvm_additional", additional))

    options.append("-Dfile.encoding=UTF-8")
    return options


def classpath(config: "ResolvedConfig", install_root: Path) -> str:
    """Build the classpath for the server.

    Args:
        config: Resolved configuration.
        install_root: Root directory of the server installation.

    Returns:
        Library and plugin directory wildcards joined by the path separator.
    """
    lib_dir = config.get_path("dbms_directories_lib", install_root, "lib")
    plugins_dir = config.get_path("dbms_directories_plugins", install_root, "plugins")
    return os.pathsep.join([f"{lib_dir}/*", f"{plugins_dir}/*"])


def entry_point(config: "ResolvedConfig") -> str:
    """Return the main class, honoring `dbms_entry_point` and the arbiter mode."""
    explicit = config.get("dbms_entry_point")
    if explicit is not None:
        return explicit
    return ARBITER_ENTRY_POINT if is_arbiter(config) else SERVER_ENTRY_POINT


def build_command(
    java: Path, config: "ResolvedConfig", paths: "ServicePaths"
) -> list[str]:
    """Build the full launch command for the server.

    Args:
        java: Path to the java executable.
        config: Resolved configuration.
        paths: Resolved service paths.

    Returns:
        The executable followed by its arguments.

    Raises:
        ConfigValidationError: If a flag string cannot be split.
    """
    return [
        str(java),
        "-cp",
        classpath(config, paths.install_root),
        *jvm_options(config, paths),
        entry_point(config),
        f"--home-dir={paths.install_root}",
        f"--config-dir={paths.config_dir}",
    ]
