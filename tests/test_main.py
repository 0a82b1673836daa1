"""Tests for CLI argument handling in main.py."""
import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from relayclip.main import main


class TestCLIArguments:
    """Tests for command-line handling."""

    def test_help_exits_with_code_0(self):
        """Test that --help exits cleanly with code 0."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "--config" in result.output
        assert "--verbose" in result.output

    def test_unknown_option_exits_with_code_2(self):
        """Test that an unknown option gives a usage error."""
        runner = CliRunner()
        result = runner.invoke(main, ["--server"])
        assert result.exit_code == 2

    def test_missing_config_is_created_and_app_runs(self, tmp_path: Path):
        """Test a missing config file is created and passed to the app."""
        config_path = tmp_path / "config.json"
        runner = CliRunner()
        with patch("relayclip.app.run_app", new_callable=AsyncMock) as mock_run:
            result = runner.invoke(main, ["--config", str(config_path)])

        assert result.exit_code == 0, result.output
        assert config_path.exists()
        mock_run.assert_awaited_once()
        config = mock_run.call_args.args[0]
        assert config.url_base == "ntfy.sh"
        assert config.url_topic == "hello"

    def test_invalid_config_exits_with_code_1(self, tmp_path: Path):
        """Test an invalid config prints an error and exits 1."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"url_base": "", "url_topic": "t", "hotkeys": "x"}))
        runner = CliRunner()
        with patch("relayclip.app.run_app", new_callable=AsyncMock) as mock_run:
            result = runner.invoke(main, ["--config", str(config_path)])

        assert result.exit_code == 1
        assert "Error: url_base must not be empty" in result.output
        mock_run.assert_not_awaited()
