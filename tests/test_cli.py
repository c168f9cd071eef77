"""Tests for the command-line interface."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from ouicollector import __version__
from ouicollector.cli import main, run


@pytest.fixture
def runner():
    return CliRunner()


class TestMain:
    """Test option handling of the main command."""

    def test_version(self, runner):
        """Test --version prints the version and exits 0."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert result.output == f"oui_textfile_collector v{__version__}\n"

    def test_defaults_passed_to_scheduler(self, runner):
        """Test default options build the expected configuration."""
        with patch("ouicollector.cli.setup_logging"), patch("ouicollector.cli.RefreshScheduler") as mock_scheduler:
            result = runner.invoke(main, [])

        assert result.exit_code == 0
        config = mock_scheduler.call_args.args[0]
        assert config.output_file == Path("/var/lib/node_exporter/textfile/oui.prom")
        assert config.metric_name == "mac_oui_info"
        assert config.refresh_interval == 168 * 3600
        mock_scheduler.return_value.run_forever.assert_called_once_with()

    def test_options(self, runner, tmp_path):
        """Test explicit options override defaults."""
        output = tmp_path / "oui.prom"
        with patch("ouicollector.cli.setup_logging") as mock_logging, patch(
            "ouicollector.cli.RefreshScheduler"
        ) as mock_scheduler:
            result = runner.invoke(
                main,
                [
                    "--log-level",
                    "debug",
                    "--refresh-interval",
                    "24h",
                    "--output-file",
                    str(output),
                    "--metric-name",
                    "oui_info",
                ],
            )

        assert result.exit_code == 0
        mock_logging.assert_called_once_with("debug")
        config = mock_scheduler.call_args.args[0]
        assert config.output_file == output
        assert config.metric_name == "oui_info"
        assert config.refresh_interval == 24 * 3600

    def test_environment_overrides(self, runner):
        """Test prefixed environment variables override defaults."""
        env = {
            "OUI_TEXTFILE_COLLECTOR_METRIC_NAME": "env_metric",
            "OUI_TEXTFILE_COLLECTOR_REFRESH_INTERVAL": "30m",
            "OUI_TEXTFILE_COLLECTOR_LOG_LEVEL": "warn",
        }
        with patch("ouicollector.cli.setup_logging") as mock_logging, patch(
            "ouicollector.cli.RefreshScheduler"
        ) as mock_scheduler:
            result = runner.invoke(main, [], env=env)

        assert result.exit_code == 0
        mock_logging.assert_called_once_with("warn")
        config = mock_scheduler.call_args.args[0]
        assert config.metric_name == "env_metric"
        assert config.refresh_interval == 1800

    def test_invalid_refresh_interval(self, runner):
        """Test an unparseable refresh interval is fatal."""
        with patch("ouicollector.cli.setup_logging"), patch("ouicollector.cli.RefreshScheduler") as mock_scheduler:
            result = runner.invoke(main, ["--refresh-interval", "weekly"])

        assert result.exit_code == 1
        mock_scheduler.assert_not_called()

    def test_keyboard_interrupt(self, runner):
        """Test Ctrl-C shuts down cleanly."""
        with patch("ouicollector.cli.setup_logging"), patch("ouicollector.cli.RefreshScheduler") as mock_scheduler:
            mock_scheduler.return_value.run_forever.side_effect = KeyboardInterrupt
            result = runner.invoke(main, [])

        assert result.exit_code == 0


class TestRun:
    """Test the console script wrapper."""

    def test_invalid_log_level_exits_1(self, monkeypatch, capsys):
        """Test invalid option values print usage and exit 1."""
        monkeypatch.setattr(sys, "argv", ["oui_textfile_collector", "--log-level", "verbose"])
        with pytest.raises(SystemExit) as exc_info:
            run()
        assert exc_info.value.code == 1
        assert "Usage:" in capsys.readouterr().err

    def test_unknown_option_exits_1(self, monkeypatch):
        """Test unknown flags exit 1."""
        monkeypatch.setattr(sys, "argv", ["oui_textfile_collector", "--bogus"])
        with pytest.raises(SystemExit) as exc_info:
            run()
        assert exc_info.value.code == 1

    def test_version_exits_0(self, monkeypatch, capsys):
        """Test --version through the wrapper exits 0."""
        monkeypatch.setattr(sys, "argv", ["oui_textfile_collector", "--version"])
        with pytest.raises(SystemExit) as exc_info:
            run()
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
