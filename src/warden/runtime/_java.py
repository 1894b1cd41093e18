"""Java runtime discovery and validation.

The server runs on a JVM. Before any lifecycle operation that launches
the server, the controller locates a `java` executable and checks that it
reports a supported version.
"""

import os
import re
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from warden.exceptions import RuntimeNotFoundError, UnsupportedRuntimeError

if TYPE_CHECKING:
    from warden.config import EnvironmentOverrides

MINIMUM_JAVA_VERSION = 8
"""Lowest supported Java major version."""

SUPPORTED_VENDORS = ("HotSpot", "OpenJDK")

JAVA_REMEDY = (
    "Install Java 8 or newer (OpenJDK or Oracle HotSpot) and put it on PATH, "
    "or point JAVA_HOME or JAVA_CMD at an existing installation."
)

_VERSION_PATTERN = re.compile(r'version "([^"]+)"')


@dataclass(frozen=True, slots=True)
class JavaRuntime:
    """A validated Java runtime.

    Attributes:
        executable: Path to the `java` executable.
        version: Version string reported by `java -version`.
        major: Major version number (8 for "1.8.0_292", 17 for "17.0.2").
        supported_vendor: Whether the vendor is one the server is tested on.
    """

    executable: Path
    version: str
    major: int
    supported_vendor: bool


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_java(
    overrides: "EnvironmentOverrides | None" = None,
    *,
    which: Callable[[str], str | None] = shutil.which,
) -> Path:
    """Locate the java executable.

    Search order: JAVA_CMD, then JAVA_HOME/bin/java, then `java` on PATH.
    An explicit JAVA_CMD or JAVA_HOME that does not lead to an executable
    is an error rather than a reason to keep searching.

    Args:
        overrides: Environment overrides carrying JAVA_CMD and JAVA_HOME.
        which: PATH lookup function.

    Returns:
        Path to the java executable.

    Raises:
        RuntimeNotFoundError: If no usable executable is found.
    """
    if overrides is not None and overrides.java_cmd is not None:
        if _is_executable(overrides.java_cmd):
            return overrides.java_cmd
        msg = f"JAVA_CMD does not point to an executable: {overrides.java_cmd}"
        raise RuntimeNotFoundError(msg, remedy=JAVA_REMEDY)

    if overrides is not None and overrides.java_home is not None:
        candidate = overrides.java_home / "bin" / "java"
        if _is_executable(candidate):
            return candidate
        msg = f"Unable to find a Java executable in JAVA_HOME: {candidate}"
        raise RuntimeNotFoundError(msg, remedy=JAVA_REMEDY)

    found = which("java")
    if found is None:
        msg = "Unable to find a Java executable on PATH."
        raise RuntimeNotFoundError(msg, remedy=JAVA_REMEDY)
    return Path(found)


def parse_java_version(output: str) -> tuple[str, int] | None:
    """Extract the version string and major version from `java -version`.

    Args:
        output: Combined output of `java -version`.

    Returns:
        The version string and major version, or None if no version is found.
    """
    match = _VERSION_PATTERN.search(output)
    if match is None:
        return None

    version = match.group(1)
    parts = re.split(r"[._+-]", version)
    # Legacy scheme: "1.8.0_292" is Java 8
    if parts[0] == "1" and len(parts) > 1:
        parts = parts[1:]
    try:
        major = int(parts[0])
    except ValueError:
        return None
    return version, major


def check_java(
    executable: Path,
    *,
    run: Callable[..., "subprocess.CompletedProcess[str]"] = subprocess.run,
) -> JavaRuntime:
    """Validate a java executable by running `java -version`.

    Args:
        executable: Path to the java executable.
        run: Function used to run the executable.

    Returns:
        The validated JavaRuntime.

    Raises:
        RuntimeNotFoundError: If the executable cannot be run.
        UnsupportedRuntimeError: If the version cannot be determined or is
            below the supported minimum.
    """
    try:
        result = run(
            [str(executable), "-version"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        msg = f"Unable to run Java executable {executable}: {e}"
        raise RuntimeNotFoundError(msg, remedy=JAVA_REMEDY) from e

    output = f"{result.stderr or ''}{result.stdout or ''}"
    parsed = parse_java_version(output)
    if parsed is None:
        msg = f"Unable to determine the version of {executable}."
        raise UnsupportedRuntimeError(msg, remedy=JAVA_REMEDY)

    version, major = parsed
    if major < MINIMUM_JAVA_VERSION:
        msg = f"The server cannot be started using java version {version}."
        raise UnsupportedRuntimeError(msg, version=version, remedy=JAVA_REMEDY)

    return JavaRuntime(
        executable=executable,
        version=version,
        major=major,
        supported_vendor=any(vendor in output for vendor in SUPPORTED_VENDORS),
    )
