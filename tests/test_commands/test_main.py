"""Tests for lookup3_tools.__main__ module."""

import json
import re

from click.testing import CliRunner

from lookup3_tools.__main__ import main


class TestMainCLI:
    """Tests for main CLI functionality."""

    def test_main_help(self, runner: CliRunner) -> None:
        """Test main command help output."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "lookup3 hashlittle2" in result.output
        assert "hash" in result.output
        assert "verify" in result.output

    def test_version_command(self, runner: CliRunner, isolated_config) -> None:
        """Test version command."""
        result = runner.invoke(main, ["version"])
        assert result.exit_code == 0
        # Remove ANSI color codes for testing
        clean_output = re.sub(r'\x1b\[[0-9;]*m', '', result.output)
        assert "lookup3-tools 0.1.0" in clean_output

    def test_version_json(self, runner: CliRunner, isolated_config) -> None:
        """Test version command with JSON output."""
        result = runner.invoke(main, ["--output", "json", "version"])
        assert result.exit_code == 0
        info = json.loads(result.output)
        assert info["name"] == "lookup3-tools"
        assert info["version"] == "0.1.0"

    def test_version_option(self, runner: CliRunner) -> None:
        """Test --version option."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_verbose_flag(self, runner: CliRunner, isolated_config) -> None:
        """Test verbose flag is accepted."""
        result = runner.invoke(main, ["--verbose", "version"])
        assert result.exit_code == 0

    def test_debug_flag(self, runner: CliRunner, isolated_config) -> None:
        """Test debug flag is accepted."""
        result = runner.invoke(main, ["--debug", "version"])
        assert result.exit_code == 0

    def test_config_file_sets_output(self, runner: CliRunner, temp_dir) -> None:
        """Test output format is taken from the config file."""
        config_file = temp_dir / "config.json"
        config_file.write_text(json.dumps({"output_format": "plain"}))

        result = runner.invoke(main, ["--config", str(config_file), "hash", "abc"])
        assert result.exit_code == 0
        assert result.output.strip() == "0e3976313c03be9e  abc"

    def test_invalid_config_file(self, runner: CliRunner, temp_dir) -> None:
        """Test an invalid config file exits with an error."""
        config_file = temp_dir / "config.json"
        config_file.write_text(json.dumps({"output_format": "yaml"}))

        result = runner.invoke(main, ["--config", str(config_file), "version"])
        assert result.exit_code == 1
