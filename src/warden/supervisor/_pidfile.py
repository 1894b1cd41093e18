"""Pidfile persistence and liveness probing.

The pidfile is the only state shared between controller invocations. It
holds the decimal pid of the detached server. Presence of the file plus a
successful liveness probe together mean "running".
"""

import os
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations

from warden.exceptions import PidfileError

from ._models import ProcessRecord


def is_process_alive(pid: int) -> bool:
    """Check whether a pid refers to a live process.

    Sends signal 0, which performs error checking without affecting the
    target. A pid owned by another user still counts as alive. Exited
    children of the current process are reaped first so they do not
    linger as zombies that answer the probe.

    Args:
        pid: Process ID to probe.

    Returns:
        True if the process exists.
    """
    if pid <= 0:
        return False

    try:
        reaped, _ = os.waitpid(pid, os.WNOHANG)
    except ChildProcessError:
        # Not our child; only the signal probe applies
        pass
    else:
        if reaped == pid:
            return False

    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    return True


def read_pid(pidfile: Path) -> int | None:
    """Read the pid recorded in a pidfile.

    Args:
        pidfile: Path to the pidfile.

    Returns:
        The recorded pid, or None if the file is missing or does not hold a
        positive decimal integer.

    Raises:
        PidfileError: If the pidfile exists but cannot be read.
    """
    try:
        content = pidfile.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None
    except UnicodeDecodeError:
        return None
    except OSError as e:
        msg = f"Cannot read pidfile {pidfile}: {e.strerror or e}"
        raise PidfileError(msg, pidfile=pidfile) from e

    try:
        pid = int(content)
    except ValueError:
        return None
    return pid if pid > 0 else None


def probe(pidfile: Path) -> ProcessRecord:
    """Probe the liveness of the service recorded in a pidfile.

    Never modifies or deletes the pidfile; callers that observe a stale
    record decide whether to remove it.

    Args:
        pidfile: Path to the pidfile.

    Returns:
        A fresh ProcessRecord. Stale records keep the pid.
    """
    pid = read_pid(pidfile)
    if pid is None:
        return ProcessRecord()
    return ProcessRecord(pid=pid, live=is_process_alive(pid))


def write_pid(pidfile: Path, pid: int) -> None:
    """Record a pid, creating the pidfile's directory if needed.

    Args:
        pidfile: Path to the pidfile.
        pid: Process ID to record.

    Raises:
        PidfileError: If the pidfile cannot be written.
    """
    try:
        pidfile.parent.mkdir(parents=True, exist_ok=True)
        _ = pidfile.write_text(f"{pid}\n", encoding="utf-8")
    except OSError as e:
        msg = f"Cannot write pidfile {pidfile}: {e.strerror or e}"
        raise PidfileError(msg, pid=pid, pidfile=pidfile) from e


def remove_pidfile(pidfile: Path) -> bool:
    """Delete a pidfile if it exists.

    Args:
        pidfile: Path to the pidfile.

    Returns:
        True if a file was removed.

    Raises:
        PidfileError: If the pidfile exists but cannot be removed.
    """
    try:
        pidfile.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        msg = f"Cannot remove pidfile {pidfile}: {e.strerror or e}"
        raise PidfileError(msg, pidfile=pidfile) from e
    return True
