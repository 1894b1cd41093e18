"""Startup message shown after a confirmed detached start."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from warden.config import ResolvedConfig
    from warden.supervisor import ProcessRecord, ServicePaths


def start_message(
    record: "ProcessRecord", config: "ResolvedConfig", paths: "ServicePaths"
) -> str:
    """Build the message printed once the server process is live.

    Liveness only means the process exists; the message says so.

    Args:
        record: The live process record.
        config: Resolved configuration.
        paths: Resolved service paths.

    Returns:
        A multi-line message for the operator.
    """
    lines = [f"Started {paths.service} (pid {record.pid})."]

    address = config.get("dbms_connector_http_address")
    if address is not None:
        lines.append(f"It is available at http://{address}/")

    lines.append(
        "There may be a short delay until the server is ready. "
        f"See {paths.console_log} for current status."
    )
    return "\n".join(lines)
