"""Tests for the root shapeguard CLI."""

from click.testing import CliRunner

from shapeguard import __version__
from shapeguard.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "shapeguard" in result.output
    assert "laws" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--log-json", "--version"])
    assert result.exit_code == 0
