"""Shared test fixtures for warden tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from warden.config import ENVIRONMENT_VARIABLES, ResolvedConfig
from warden.supervisor import ServicePaths, resolve_paths


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Create an empty server install root.

    Structure:
        tmp_path/
            server/
                conf/
    """
    root = tmp_path / "server"
    (root / "conf").mkdir(parents=True)
    return root


@pytest.fixture
def service_paths(install_root: Path) -> ServicePaths:
    """Service paths for the install root with default configuration."""
    return resolve_paths(install_root, ResolvedConfig())


def write_config(path: Path, *lines: str) -> Path:
    """Write configuration lines to a file, creating parent directories.

    Args:
        path: File to write.
        lines: Lines to write, without trailing newlines.

    Returns:
        The path that was written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text("".join(f"{line}\n" for line in lines))
    return path


@pytest.fixture
def warden_environment(install_root: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point WARDEN_HOME at the install root and clear every other override."""
    for variable in ENVIRONMENT_VARIABLES.values():
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.delenv("WARDEN_DEBUG", raising=False)
    monkeypatch.delenv("WARDEN_LOG_LEVEL", raising=False)
    monkeypatch.setenv("WARDEN_HOME", str(install_root))
    return install_root


class Consoles:
    """Output and error consoles backed by in-memory buffers."""

    def __init__(self) -> None:
        self.out_buffer = io.StringIO()
        self.err_buffer = io.StringIO()
        self.out = Console(file=self.out_buffer, width=200, color_system=None)
        self.err = Console(file=self.err_buffer, width=200, color_system=None)

    @property
    def stdout(self) -> str:
        return self.out_buffer.getvalue()

    @property
    def stderr(self) -> str:
        return self.err_buffer.getvalue()


@pytest.fixture
def consoles() -> Consoles:
    return Consoles()
