"""Tests for the main CLI application."""

import re

from typer.testing import CliRunner

from shelfsite.cli.main import app

runner = CliRunner()


def _strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    ansi_escape = re.compile(r"\x1b\[[0-9;]*m")
    return ansi_escape.sub("", text)


def test_cli_help():
    """Test that the main CLI entrypoint runs and shows help."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    clean_output = _strip_ansi(result.stdout)
    assert "Usage: shelfsite [OPTIONS] COMMAND [ARGS]..." in clean_output
    for command in ("setup", "status", "validate", "init", "build", "config"):
        assert command in clean_output


def test_config_help_lists_subcommands():
    result = runner.invoke(app, ["config", "--help"])
    assert result.exit_code == 0
    clean_output = _strip_ansi(result.stdout)
    assert "show" in clean_output
    assert "set" in clean_output
