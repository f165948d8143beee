"""Tests for CLI help system and workflow examples."""

from click.testing import CliRunner
from lfm.cli import cli


def test_cli_help_contains_workflow_examples():
    """Test that main CLI help contains workflow examples."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "TYPICAL WORKFLOWS:" in result.output
    assert "lfm match --type lost" in result.output
    assert "auto-match" in result.output
    assert "LFM__SCORING__MIN_ACCEPT_SCORE" in result.output


def test_subcommands_registered():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    for name in ("match", "auto-match", "config"):
        assert name in result.output


def test_auto_match_help_lists_confidence_choices():
    runner = CliRunner()
    result = runner.invoke(cli, ["auto-match", "--help"])

    assert result.exit_code == 0
    assert "--bidirectional" in result.output
    assert "high" in result.output and "medium" in result.output
