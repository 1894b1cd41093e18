from pathlib import Path

import pytest

from warden.config import ResolvedConfig


class TestResolvedConfig:
    def test_behaves_as_read_only_mapping(self) -> None:
        config = ResolvedConfig({"a": "1", "b": "2"})

        assert config["a"] == "1"
        assert len(config) == 2
        assert sorted(config) == ["a", "b"]
        assert "a" in config

    def test_copies_input_mapping(self) -> None:
        values = {"a": "1"}
        config = ResolvedConfig(values)

        values["a"] = "changed"

        assert config["a"] == "1"

    def test_get_returns_default_for_missing_key(self) -> None:
        assert ResolvedConfig().get("missing", "fallback") == "fallback"

    def test_get_treats_empty_value_as_missing(self) -> None:
        config = ResolvedConfig({"a": ""})

        assert config.get("a") is None
        assert config.get("a", "fallback") == "fallback"

    def test_defaults_to_no_sources(self) -> None:
        assert ResolvedConfig().sources == ()


class TestGetBool:
    @pytest.mark.parametrize("value", ["true", "TRUE", "yes", "on", "1", " True "])
    def test_true_values(self, value: str) -> None:
        assert ResolvedConfig({"flag": value}).get_bool("flag") is True

    @pytest.mark.parametrize("value", ["false", "no", "off", "0", "enabled"])
    def test_other_values_are_false(self, value: str) -> None:
        assert ResolvedConfig({"flag": value}).get_bool("flag") is False

    def test_missing_key_returns_default(self) -> None:
        assert ResolvedConfig().get_bool("flag", default=True) is True


class TestGetPath:
    def test_relative_value_resolves_against_root(self) -> None:
        config = ResolvedConfig({"dbms_directories_logs": "var/log"})

        path = config.get_path("dbms_directories_logs", Path("/opt/server"), "logs")

        assert path == Path("/opt/server/var/log")

    def test_absolute_value_is_unchanged(self) -> None:
        config = ResolvedConfig({"dbms_directories_logs": "/var/log/server"})

        path = config.get_path("dbms_directories_logs", Path("/opt/server"), "logs")

        assert path == Path("/var/log/server")

    def test_missing_key_uses_default(self) -> None:
        path = ResolvedConfig().get_path("missing", Path("/opt/server"), "data/log")

        assert path == Path("/opt/server/data/log")
