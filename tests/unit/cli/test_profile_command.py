"""Unit tests for the profile commands."""

import json
from pathlib import Path

import pytest
from treesift.cli.main import app
from treesift.profiles import load_profiles
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def profiles_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path / "config" / "treesift" / "profiles.toml"


class TestProfileSave:
    """Tests for profile save."""

    def test_save(self, profiles_file: Path) -> None:
        """Filters are written to profiles.toml."""
        result = runner.invoke(
            app, ["profile", "save", "logs", "/var/log", "-n", "*.log", "-t", "files"]
        )

        assert result.exit_code == 0, result.output
        assert "Saved profile 'logs'" in result.output
        profile = load_profiles(profiles_file).profiles["logs"]
        assert profile.roots == ["/var/log"]
        assert profile.names == ["*.log"]
        assert profile.entry_type.value == "files"

    def test_replace_warns(self, profiles_file: Path) -> None:
        """Saving over an existing profile warns and replaces it."""
        runner.invoke(app, ["profile", "save", "logs", "-n", "*.log"])

        result = runner.invoke(app, ["profile", "save", "logs", "-n", "*.txt"])

        assert result.exit_code == 0
        assert "Replacing existing profile 'logs'" in result.output
        assert load_profiles(profiles_file).profiles["logs"].names == ["*.txt"]

    def test_rejects_malformed_pattern(self, profiles_file: Path) -> None:
        """Profiles with malformed patterns are not saved."""
        result = runner.invoke(app, ["profile", "save", "bad", "-n", "["])

        assert result.exit_code == 1
        assert "error parsing glob" in result.output
        assert not profiles_file.exists()

    def test_rejects_inverted_range(self, profiles_file: Path) -> None:
        """Inverted size ranges are rejected."""
        result = runner.invoke(
            app, ["profile", "save", "bad", "--min-size", "10", "--max-size", "1"]
        )

        assert result.exit_code == 1
        assert "Invalid filter options" in result.output


class TestProfileList:
    """Tests for profile list."""

    def test_empty(self, profiles_file: Path) -> None:
        """An empty store says so."""
        result = runner.invoke(app, ["profile", "list"])

        assert result.exit_code == 0
        assert "No saved profiles." in result.output

    def test_lists_profiles(self, profiles_file: Path) -> None:
        """Saved profiles are listed by name."""
        runner.invoke(app, ["profile", "save", "alpha", "-n", "*.py"])
        runner.invoke(app, ["profile", "save", "beta", "--ignore-vcs"])

        result = runner.invoke(app, ["profile", "list"])

        assert result.exit_code == 0
        assert "Saved Profiles" in result.output
        assert "alpha" in result.output
        assert "beta" in result.output

    def test_corrupt_file(self, profiles_file: Path) -> None:
        """A broken profiles file is reported."""
        profiles_file.parent.mkdir(parents=True)
        profiles_file.write_text("not toml [[[")

        result = runner.invoke(app, ["profile", "list"])

        assert result.exit_code == 1
        assert "Invalid TOML syntax" in result.output


class TestProfileShow:
    """Tests for profile show."""

    def test_show(self, profiles_file: Path) -> None:
        """show prints the non-default fields as JSON."""
        runner.invoke(app, ["profile", "save", "logs", "-n", "*.log", "--max-depth", "2"])

        result = runner.invoke(app, ["profile", "show", "logs"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"names": ["*.log"], "max_depth": 2}

    def test_show_missing(self, profiles_file: Path) -> None:
        """Showing an unknown profile fails."""
        result = runner.invoke(app, ["profile", "show", "nope"])

        assert result.exit_code == 1
        assert "Profile not found: nope" in result.output


class TestProfileDelete:
    """Tests for profile delete."""

    def test_delete(self, profiles_file: Path) -> None:
        """delete removes the profile."""
        runner.invoke(app, ["profile", "save", "logs", "-n", "*.log"])

        result = runner.invoke(app, ["profile", "delete", "logs"])

        assert result.exit_code == 0
        assert "Deleted profile 'logs'" in result.output
        assert load_profiles(profiles_file).profiles == {}

    def test_delete_missing(self, profiles_file: Path) -> None:
        """Deleting an unknown profile fails."""
        result = runner.invoke(app, ["profile", "delete", "nope"])

        assert result.exit_code == 1
        assert "Profile not found" in result.output
