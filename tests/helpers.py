"""Factories shared by the test suite."""

from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

from gh_triage.github_client.models import (
    GitHubComment,
    GitHubIssue,
    GitHubIssueEvent,
    GitHubLabel,
    GitHubUser,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def paged(*pages: Sequence[Any]) -> Callable[..., list[Any]]:
    """Side effect serving ``pages`` by their trailing 1-indexed page argument."""

    def fetch(*args: Any, **kwargs: Any) -> list[Any]:
        page = args[-1]
        if page <= len(pages):
            return list(pages[page - 1])
        return []

    return fetch


def make_user(login: str, user_type: str = "User") -> GitHubUser:
    return GitHubUser(login=login, id=abs(hash(login)) % 100000, type=user_type)


def make_issue(
    number: int = 1,
    days_old: float = 0,
    labels: Sequence[str] = (),
    author: str = "author",
    is_pull_request: bool = False,
) -> GitHubIssue:
    return GitHubIssue(
        number=number,
        title=f"Issue {number}",
        user=make_user(author),
        labels=[GitHubLabel(name=name) for name in labels],
        updated_at=NOW - timedelta(days=days_old),
        is_pull_request=is_pull_request,
    )


def make_comment(
    login: str | None, days_ago: float, user_type: str = "User"
) -> GitHubComment:
    return GitHubComment(
        id=abs(hash((login, days_ago))) % 100000,
        user=make_user(login, user_type) if login else None,
        created_at=NOW - timedelta(days=days_ago),
    )


def make_event(
    login: str | None, event: str, days_ago: float, user_type: str = "User"
) -> GitHubIssueEvent:
    return GitHubIssueEvent(
        id=abs(hash((login, event, days_ago))) % 100000,
        actor=make_user(login, user_type) if login else None,
        event=event,
        created_at=NOW - timedelta(days=days_ago),
    )


