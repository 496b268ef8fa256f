"""Tests for the scroll-window command line."""

from pathlib import Path

import pytest
from loguru import logger

from scroll_window import cli
from scroll_window.domain.simulation import SimulatedHost, uniform_heights


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config, data and log files inside tmp_path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.delenv("SCROLL_WINDOW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SCROLL_WINDOW_MIN_ROW_HEIGHT", raising=False)
    monkeypatch.chdir(tmp_path)


class TestSimulate:
    """Tests for the simulate subcommand."""

    def test_runs_scroll_sequence(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = cli.main(
            [
                "--config",
                str(tmp_path / "config.toml"),
                "simulate",
                "--items",
                "500",
                "--viewport",
                "200",
                "--min-row",
                "20",
                "--max-row",
                "60",
                "--scroll",
                "1000",
                "--scroll",
                "4000",
            ]
        )

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "Estimator frames" in output
        assert "final average row height" in output
        assert output.count("Estimator frames") == 1

    def test_rejects_inverted_height_range(self, tmp_path: Path) -> None:
        exit_code = cli.main(
            [
                "--config",
                str(tmp_path / "config.toml"),
                "simulate",
                "--min-row",
                "50",
                "--max-row",
                "20",
            ]
        )
        assert exit_code == 1

    def test_rejects_invalid_minimum(self, tmp_path: Path) -> None:
        exit_code = cli.main(
            ["--config", str(tmp_path / "config.toml"), "simulate", "--min-row", "0"]
        )
        assert exit_code == 1


class TestFramesTable:
    def test_one_row_per_frame(self) -> None:
        host = SimulatedHost(uniform_heights(1000, 50), min_row_height=50, viewport_height=500)
        frames = host.scroll_to(20000)

        table = cli.build_frames_table(frames)

        assert table.row_count == len(frames)


class TestInitConfig:
    def test_writes_then_refuses_to_overwrite(self, tmp_path: Path) -> None:
        config_path = tmp_path / "xdg-config" / "scroll-window" / "config.toml"

        assert cli.main(["init-config"]) == 0
        assert config_path.exists()
        assert cli.main(["init-config"]) == 1
        assert cli.main(["init-config", "--force"]) == 0

    def test_reports_once_and_logs_to_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The confirmation is printed once and recorded in the default log file."""
        log_file = tmp_path / "xdg-data" / "scroll-window" / "scroll-window.log"

        assert cli.main(["init-config"]) == 0
        logger.remove()  # Closes the file sink

        captured = capsys.readouterr()
        assert captured.out.count("Wrote default configuration") == 1
        assert "Wrote default configuration" not in captured.err
        assert "Wrote default configuration" in log_file.read_text(encoding="utf-8")


class TestMain:
    def test_no_subcommand_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main([]) == 1
        assert "scroll-window" in capsys.readouterr().out
