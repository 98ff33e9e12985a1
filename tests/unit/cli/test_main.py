"""Unit tests for the main CLI application."""

import logging

from treesift import __version__
from treesift.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"treesift version {__version__}" in result.output

    def test_help(self) -> None:
        """--help lists the commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "find" in result.output
        assert "profile" in result.output

    def test_no_args_shows_help(self) -> None:
        """Running without a command shows usage."""
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_verbose_describes_search(self, fixture_tree) -> None:  # type: ignore[no-untyped-def]
        """--verbose prints the roots and active filters."""
        result = runner.invoke(
            app, ["--verbose", "find", str(fixture_tree), "-n", "*.log", "-f", "plain"]
        )

        assert result.exit_code == 0
        assert "Searching" in result.output
        assert 'name "*.log"' in result.output
        assert logging.getLogger().level == logging.DEBUG

    def test_default_log_level(self, fixture_tree) -> None:  # type: ignore[no-untyped-def]
        """Without --verbose only errors are logged."""
        result = runner.invoke(app, ["find", str(fixture_tree), "-f", "plain"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR
