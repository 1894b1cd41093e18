from pathlib import Path

from warden.config import (
    config_sources,
    get_primary_config_path,
    get_wrapper_config_path,
)


class TestConfigPaths:
    def test_wrapper_config_path(self) -> None:
        assert get_wrapper_config_path(Path("/opt/server/conf")) == Path(
            "/opt/server/conf/server-wrapper.conf"
        )

    def test_primary_config_path(self) -> None:
        assert get_primary_config_path(Path("/opt/server/conf")) == Path(
            "/opt/server/conf/server.conf"
        )

    def test_service_name_is_the_file_stem(self) -> None:
        assert get_primary_config_path(Path("/conf"), "arbiter") == Path(
            "/conf/arbiter.conf"
        )


class TestConfigSources:
    def test_wrapper_precedes_primary(self) -> None:
        assert config_sources(Path("/conf")) == [
            Path("/conf/server-wrapper.conf"),
            Path("/conf/server.conf"),
        ]

    def test_returns_paths_that_do_not_exist(self, tmp_path: Path) -> None:
        sources = config_sources(tmp_path / "missing")

        assert len(sources) == 2
        assert not any(path.exists() for path in sources)
