"""Tests for configuration loading."""

from pathlib import Path

import pytest

from scroll_window.core.config import (
    Config,
    EstimatorConfig,
    SimulationConfig,
    create_default_config,
    get_config_dir,
    get_data_dir,
    load_config,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point XDG dirs at tmp_path and clear overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.delenv("SCROLL_WINDOW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SCROLL_WINDOW_MIN_ROW_HEIGHT", raising=False)


class TestDirectories:
    def test_config_dir_follows_xdg(self, tmp_path: Path) -> None:
        assert get_config_dir() == tmp_path / "xdg-config" / "scroll-window"

    def test_data_dir_follows_xdg(self, tmp_path: Path) -> None:
        assert get_data_dir() == tmp_path / "xdg-data" / "scroll-window"


class TestLoadConfig:
    """Tests for TOML parsing, validation and overrides."""

    def test_missing_file_writes_default(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"

        config = load_config(config_path)

        assert config == Config()
        assert config_path.read_text(encoding="utf-8") == create_default_config()

    def test_default_file_round_trips(self, tmp_path: Path) -> None:
        """The generated default file parses back to the default Config."""
        config_path = tmp_path / "config.toml"
        config_path.write_text(create_default_config(), encoding="utf-8")

        assert load_config(config_path) == Config()

    def test_sections_are_parsed(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text(
            "[estimator]\nmin_row_height = 32\n"
            "[simulation]\ntotal_items = 250\nviewport_height = 300\n"
            "[logging]\nlevel = 'debug'\nlog_file = '~/sw.log'\n",
            encoding="utf-8",
        )

        config = load_config(config_path)

        assert config.estimator.min_row_height == 32.0
        assert config.simulation.total_items == 250
        assert config.simulation.viewport_height == 300.0
        assert config.simulation.max_render_passes == SimulationConfig().max_render_passes
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == str(Path("~/sw.log").expanduser())

    def test_invalid_section_falls_back_to_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text("[estimator]\nmin_row_height = 0\n", encoding="utf-8")

        config = load_config(config_path)

        assert config.estimator == EstimatorConfig()

    def test_malformed_file_uses_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text("[estimator\nmin_row_height = ", encoding="utf-8")

        assert load_config(config_path) == Config()

    def test_environment_overrides(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text(create_default_config(), encoding="utf-8")
        monkeypatch.setenv("SCROLL_WINDOW_LOG_LEVEL", "trace")
        monkeypatch.setenv("SCROLL_WINDOW_MIN_ROW_HEIGHT", "35")

        config = load_config(config_path)

        assert config.logging.level == "TRACE"
        assert config.estimator.min_row_height == 35.0

    def test_invalid_environment_override_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text(create_default_config(), encoding="utf-8")
        monkeypatch.setenv("SCROLL_WINDOW_MIN_ROW_HEIGHT", "-1")

        assert load_config(config_path).estimator == EstimatorConfig()


class TestValidate:
    def test_simulation_rejects_zero_passes(self) -> None:
        with pytest.raises(ValueError, match="max_render_passes"):
            SimulationConfig(max_render_passes=0).validate()
