"""Unit tests for logging utilities."""

import json
import logging
from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from warden.utils import (
    controller_logger,
    create_null_logger,
    open_file_logger,
)


class TestOpenFileLogger:
    def test_creates_log_directory_if_missing(self, fs: FakeFilesystem) -> None:
        log_path = Path("/logs/warden.log")
        assert not log_path.parent.exists()

        with open_file_logger(log_path):
            pass

        assert log_path.parent.exists()

    def test_default_format_is_json(self, fs: FakeFilesystem) -> None:
        with open_file_logger(Path("/logs/warden.log")) as logger:
            logger.info("service_started", pid=42)

        entry = json.loads(Path("/logs/warden.log").read_text().splitlines()[0])
        assert entry["event"] == "service_started"
        assert entry["pid"] == 42
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_text_format(self, fs: FakeFilesystem) -> None:
        log_path = Path("/logs/warden.log")
        with open_file_logger(log_path, log_format="text") as logger:
            logger.info("service_started", pid=42)

        log_content = Path("/logs/warden.log").read_text()
        assert "service_started" in log_content
        assert "pid=42" in log_content

    def test_appends_to_existing_log(self, fs: FakeFilesystem) -> None:
        fs.create_file("/logs/warden.log", contents="previous\n")

        with open_file_logger(Path("/logs/warden.log")) as logger:
            logger.info("service_stopped")

        lines = Path("/logs/warden.log").read_text().splitlines()
        assert lines[0] == "previous"
        assert len(lines) == 2

    def test_closes_file_on_exit(self, fs: FakeFilesystem) -> None:
        with open_file_logger(Path("/logs/warden.log")) as logger:
            stream = logger._logger._file  # pyright: ignore[reportAttributeAccessIssue]
            assert not stream.closed

        assert stream.closed

    def test_unwritable_directory_raises(self, fs: FakeFilesystem) -> None:
        fs.create_file("/logs")

        with pytest.raises(OSError), open_file_logger(Path("/logs/sub/warden.log")):
            pass


class TestResolveLevel:
    def test_defaults_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from warden.utils._logging import _resolve_level

        monkeypatch.delenv("WARDEN_DEBUG", raising=False)
        monkeypatch.delenv("WARDEN_LOG_LEVEL", raising=False)

        assert _resolve_level() == logging.INFO

    def test_debug_flag_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from warden.utils._logging import _resolve_level

        monkeypatch.setenv("WARDEN_DEBUG", "1")
        monkeypatch.setenv("WARDEN_LOG_LEVEL", "error")

        assert _resolve_level() == logging.DEBUG

    def test_reads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from warden.utils._logging import _resolve_level

        monkeypatch.delenv("WARDEN_DEBUG", raising=False)
        monkeypatch.setenv("WARDEN_LOG_LEVEL", "warning")

        assert _resolve_level() == logging.WARNING

    def test_unknown_level_falls_back_to_info(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from warden.utils._logging import _resolve_level

        monkeypatch.delenv("WARDEN_DEBUG", raising=False)
        monkeypatch.setenv("WARDEN_LOG_LEVEL", "chatty")

        assert _resolve_level() == logging.INFO


class TestControllerLogger:
    def test_binds_command(
        self, fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("WARDEN_DEBUG", raising=False)
        log_file = Path("/opt/server/data/log/warden.log")

        with controller_logger(log_file, command="stop") as logger:
            logger.info("service_stopped")

        entry = json.loads(log_file.read_text())
        assert entry["command"] == "stop"
        assert entry["event"] == "service_stopped"

    def test_respects_level(
        self, fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("WARDEN_DEBUG", raising=False)
        log_file = Path("/logs/warden.log")

        with controller_logger(log_file, level="warning") as logger:
            logger.info("ignored")
            logger.warning("kept")

        content = log_file.read_text()
        assert "ignored" not in content
        assert "kept" in content

    def test_debug_environment_overrides_level(
        self, fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WARDEN_DEBUG", "1")
        log_file = Path("/logs/warden.log")

        with controller_logger(log_file, level="error") as logger:
            logger.debug("config_loaded")

        assert "config_loaded" in log_file.read_text()


class TestCreateNullLogger:
    def test_discards_all_levels(self) -> None:
        logger = create_null_logger()

        assert logger.debug("a") is None
        assert logger.info("b") is None
        assert logger.critical("c") is None

    def test_supports_bind(self) -> None:
        logger = create_null_logger().bind(command="status")

        logger.error("d")
