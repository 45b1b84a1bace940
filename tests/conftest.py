"""Test configuration and fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from gh_triage.config import TriageConfig
from gh_triage.github_client.client import GitHubClient
from tests.helpers import paged


@pytest.fixture
def mock_client() -> MagicMock:
    """GitHub client whose listings are all empty until configured."""
    client = MagicMock(spec=GitHubClient)
    client.list_open_issues.side_effect = paged()
    client.list_comments.side_effect = paged()
    client.list_events.side_effect = paged()
    client.list_collaborators.side_effect = paged()
    client.check_collaborator.return_value = False
    return client


@pytest.fixture
def make_config() -> Callable[..., TriageConfig]:
    """Factory for configs with test-friendly defaults."""

    def factory(**overrides: Any) -> TriageConfig:
        values: dict[str, Any] = {
            "repository": "test-org/test-repo",
            "stale_issue_message": "This issue is stale",
            "stale_pr_message": "This PR is stale",
            "stale_issue_label": "Stale",
            "stale_pr_label": "Stale PR",
            "days_before_stale": 30,
            "days_before_close": 7,
            "operations_per_run": 100,
        }
        values.update(overrides)
        return TriageConfig(**values)

    return factory
