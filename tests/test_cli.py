"""Tests for tasktrack.cli module."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from uuid import UUID

import pytest
from click.testing import CliRunner

from tasktrack.cli import main


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def predictable_ids(monkeypatch: pytest.MonkeyPatch, id_sequence: Callable[[], UUID]) -> None:
    """Make stores created by the CLI hand out aaaaaaaa-..., bbbbbbbb-..., ..."""
    monkeypatch.setattr("tasktrack.store.uuid4", id_sequence)


def _lines(*answers: str) -> str:
    return "".join(f"{answer}\n" for answer in answers)


class TestMainGroup:
    """Tests for main CLI group."""

    def test_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test --version option."""
        result = cli_runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "tasktrack" in result.output
        assert "0.1.0" in result.output

    def test_help(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test --help option."""
        result = cli_runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "personal task tracker" in result.output

    def test_no_subcommand_runs_menu(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Without a subcommand the menu starts."""
        result = cli_runner.invoke(main, [], input=_lines("0"))
        assert result.exit_code == 0
        assert "Personal Task Tracker" in result.output

    def test_end_of_input(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Closing input exits successfully."""
        result = cli_runner.invoke(main, [], input="")
        assert result.exit_code == 0

    def test_invalid_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """A config file that fails validation exits with an error."""
        config_path = temp_project / "bad.json"
        config_path.write_text(json.dumps({"display": {"style": "fancy"}}))

        result = cli_runner.invoke(main, ["--config", str(config_path), "config"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_malformed_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """A config file that is not JSON exits with an error."""
        config_path = temp_project / "bad.json"
        config_path.write_text("{not json")

        result = cli_runner.invoke(main, ["--config", str(config_path), "config"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_verbose(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """--verbose is accepted before a subcommand."""
        result = cli_runner.invoke(main, ["--verbose", "config"])
        assert result.exit_code == 0


class TestMenuCommand:
    """Tests for the menu command."""

    def test_menu_exit(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """The menu command shows the menu and exits on 0."""
        result = cli_runner.invoke(main, ["menu"], input=_lines("0"))
        assert result.exit_code == 0
        assert "Sort by priority" in result.output

    def test_session_scenario(self, cli_runner: CliRunner, temp_project: Path, predictable_ids: None) -> None:
        """Add two tasks, update the first, delete the second, list the rest."""
        answers = _lines(
            "1", "Buy milk", "", "1", "1",
            "1", "Fix bug", "urgent", "3", "2",
            "2",
            "3", "aaa", "", "", "n", "y", "3",
            "4", "bbb",
            "2",
            "0",
        )  # fmt: skip
        result = cli_runner.invoke(main, ["menu"], input=answers)

        assert result.exit_code == 0
        assert result.output.count("Task added.") == 2
        assert "Task updated." in result.output
        assert "Task deleted." in result.output

        final_listing = result.output.split("Task deleted.")[-1]
        assert "Buy milk" in final_listing
        assert "Done" in final_listing
        assert "Fix bug" not in final_listing

    def test_errors_do_not_stop_the_menu(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Errors are reported and the menu continues."""
        result = cli_runner.invoke(main, ["menu"], input=_lines("7", "4", "nothing", "0"))
        assert result.exit_code == 0
        assert result.output.count("An error occurred. Please try again.") == 2

    def test_plain_style_from_config(
        self,
        cli_runner: CliRunner,
        temp_tracker_dir: Path,
        predictable_ids: None,
    ) -> None:
        """Display settings from .tasktrack/config.json are used."""
        (temp_tracker_dir / "config.json").write_text(json.dumps({"display": {"style": "plain"}}))

        result = cli_runner.invoke(main, ["menu"], input=_lines("1", "Buy milk", "", "2", "2", "2", "0"))
        assert result.exit_code == 0
        assert "[aaaaaa] Buy milk" in result.output
        assert "Priority: Medium" in result.output
        assert "Status: In Progress" in result.output

    def test_unique_prefix_from_config(
        self,
        cli_runner: CliRunner,
        temp_project: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Strict lookup rejects a prefix shared by two tasks."""
        ids = iter(
            [
                UUID("abc00000-0000-4000-8000-000000000000"),
                UUID("abd00000-0000-4000-8000-000000000000"),
            ]
        )
        monkeypatch.setattr("tasktrack.store.uuid4", lambda: next(ids))
        config_path = temp_project / "strict.json"
        config_path.write_text(json.dumps({"lookup": {"require_unique_prefix": True}}))

        answers = _lines(
            "1", "one", "", "1", "1",
            "1", "two", "", "1", "1",
            "4", "ab",
            "0",
        )  # fmt: skip
        result = cli_runner.invoke(main, ["--config", str(config_path), "menu"], input=answers)

        assert result.exit_code == 0
        assert "Task deleted." not in result.output
        assert "An error occurred. Please try again." in result.output


class TestConfigCommand:
    """Tests for the config command."""

    def test_defaults(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Default settings are listed."""
        result = cli_runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert "Display" in result.output
        assert "table" in result.output
        assert "WARNING" in result.output

    def test_from_file(self, cli_runner: CliRunner, temp_tracker_dir: Path, sample_config_data: dict) -> None:
        """Settings from the config file are listed."""
        (temp_tracker_dir / "config.json").write_text(json.dumps(sample_config_data))

        result = cli_runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert "plain" in result.output
        assert "INFO" in result.output
        assert "tasktrack.log" in result.output
