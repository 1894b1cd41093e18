"""Configuration source discovery.

The server reads two conventional sources from its config directory: a
wrapper file with launcher settings, then the primary file. Entries in
the primary file append to those in the wrapper file.
"""

from pathlib import Path

DEFAULT_SERVICE_NAME = "server"


def get_wrapper_config_path(
    config_dir: Path, service: str = DEFAULT_SERVICE_NAME
) -> Path:
    """Get the path to the wrapper configuration file."""
    return config_dir / f"{service}-wrapper.conf"


def get_primary_config_path(
    config_dir: Path, service: str = DEFAULT_SERVICE_NAME
) -> Path:
    """Get the path to the primary configuration file."""
    return config_dir / f"{service}.conf"


def config_sources(
    config_dir: Path, service: str = DEFAULT_SERVICE_NAME
) -> list[Path]:
    """Return the configuration sources in load order.

    The files are returned whether or not they exist; the loader skips
    missing ones.

    Args:
        config_dir: Directory holding the configuration files.
        service: Service name used as the file stem.

    Returns:
        The wrapper file followed by the primary file.
    """
    return [
        get_wrapper_config_path(config_dir, service),
        get_primary_config_path(config_dir, service),
    ]
