"""Tests for the triage CLI commands."""

import re
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from github.GithubException import GithubException
from typer.testing import CliRunner

from gh_triage.cli.main import app
from gh_triage.config import TriageConfig
from gh_triage.triage.engine import IssueDecision, TriageAction, TriageSummary


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from text."""
    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    return ansi_escape.sub("", text)


@pytest.fixture
def runner() -> CliRunner:
    """Provide CLI test runner."""
    return CliRunner(env={"NO_COLOR": "1", "FORCE_COLOR": "0"})


@pytest.fixture
def mock_engine() -> Generator[MagicMock]:
    """Patch the client and engine used by the CLI."""
    with (
        patch("gh_triage.cli.triage.GitHubClient") as mock_client_class,
        patch("gh_triage.cli.triage.TriageEngine") as mock_engine_class,
    ):
        mock_client_class.return_value = MagicMock()
        mock_engine_class.return_value.run.return_value = TriageSummary(
            repository="test-org/test-repo",
            issues_listed=3,
            decisions=[
                IssueDecision(
                    issue_number=1,
                    title="Old",
                    action=TriageAction.MARKED_STALE,
                    reason="inactive for 30+ day(s)",
                    operations=2,
                )
            ],
            operations_consumed=4,
            budget_exhausted=True,
        )
        yield mock_engine_class


class TestRunCommand:
    """Test the run command."""

    def test_help_display(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "--help"])
        assert result.exit_code == 0
        clean_output = strip_ansi(result.stdout)
        assert "--repo" in clean_output
        assert "--days-before-stale" in clean_output
        assert "--dry-run" in clean_output

    def test_repo_is_required(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run"])
        assert result.exit_code != 0

    def test_invalid_repo_fails_before_any_call(
        self, runner: CliRunner, mock_engine: MagicMock
    ) -> None:
        result = runner.invoke(app, ["run", "--repo", "not-a-repo"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout
        mock_engine.assert_not_called()

    def test_non_positive_threshold_fails(
        self, runner: CliRunner, mock_engine: MagicMock
    ) -> None:
        result = runner.invoke(
            app, ["run", "--repo", "o/r", "--days-before-close", "0"]
        )

        assert result.exit_code == 1
        mock_engine.assert_not_called()

    def test_runs_engine_with_config(
        self, runner: CliRunner, mock_engine: MagicMock
    ) -> None:
        result = runner.invoke(
            app,
            [
                "run",
                "--repo",
                "test-org/test-repo",
                "--token",
                "abc",
                "--stale-issue-message",
                "Still needed?",
                "--days-before-stale",
                "30",
                "--include-events",
                "labeled,assigned",
                "--last-updated-user-type",
                "non-collaborator",
                "--dry-run",
            ],
        )

        assert result.exit_code == 0, result.stdout
        config: TriageConfig = mock_engine.call_args.args[1]
        assert config.repository == "test-org/test-repo"
        assert config.stale_issue_message == "Still needed?"
        assert config.days_before_stale == 30
        assert config.events_to_check == ["labeled", "assigned"]
        assert config.dry_run is True

        clean_output = strip_ansi(result.stdout)
        assert "Dry run" in clean_output
        assert "1 marked stale" in clean_output
        assert "Operation budget exhausted, 2 item(s) left" in clean_output

    def test_github_error_exits_non_zero(
        self, runner: CliRunner, mock_engine: MagicMock
    ) -> None:
        mock_engine.return_value.run.side_effect = GithubException(
            401, "Bad credentials", None
        )

        result = runner.invoke(app, ["run", "--repo", "o/r", "--token", "abc"])

        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestActionCommand:
    """Test the action command."""

    def test_bad_numeric_input(self, runner: CliRunner, mock_engine: MagicMock) -> None:
        env = {
            "GITHUB_REPOSITORY": "o/r",
            "INPUT_REPO-TOKEN": "abc",
            "INPUT_DAYS-BEFORE-STALE": "sixty",
            "INPUT_DAYS-BEFORE-CLOSE": "7",
            "INPUT_STALE-ISSUE-LABEL": "Stale",
            "INPUT_STALE-PR-LABEL": "Stale",
            "INPUT_OPERATIONS-PER-RUN": "30",
        }

        result = runner.invoke(app, ["action"], env=env)

        assert result.exit_code == 1
        assert "did not parse to a valid integer" in strip_ansi(result.stdout)
        mock_engine.assert_not_called()

    def test_runs_with_inputs(self, runner: CliRunner, mock_engine: MagicMock) -> None:
        env = {
            "GITHUB_REPOSITORY": "test-org/test-repo",
            "INPUT_REPO-TOKEN": "abc",
            "INPUT_STALE-ISSUE-MESSAGE": "stale",
            "INPUT_DAYS-BEFORE-STALE": "60",
            "INPUT_DAYS-BEFORE-CLOSE": "7",
            "INPUT_STALE-ISSUE-LABEL": "Stale",
            "INPUT_STALE-PR-LABEL": "Stale",
            "INPUT_OPERATIONS-PER-RUN": "30",
        }

        with patch("gh_triage.cli.triage.GitHubClient") as mock_client_class:
            result = runner.invoke(app, ["action"], env=env)

        assert result.exit_code == 0, result.stdout
        mock_client_class.assert_called_once_with(token="abc")
        config: TriageConfig = mock_engine.call_args.args[1]
        assert config.days_before_stale == 60


def test_version_command(runner: CliRunner) -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "GitHub Stale Triage v" in result.stdout
