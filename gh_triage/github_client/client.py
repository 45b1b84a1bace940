"""GitHub API client using PyGitHub."""

import logging
import os

from github import Github
from github.GithubException import UnknownObjectException
from github.Issue import Issue
from github.IssueComment import IssueComment
from github.IssueEvent import IssueEvent
from github.Label import Label
from github.NamedUser import NamedUser
from github.Organization import Organization
from github.Repository import Repository

from .models import (
    GHOST_LOGIN,
    GitHubComment,
    GitHubIssue,
    GitHubIssueEvent,
    GitHubLabel,
    GitHubUser,
)

logger = logging.getLogger(__name__)

PER_PAGE = 100


class GitHubClient:
    """GitHub API client exposing the paged reads and writes used by triage.

    Every listing method returns a single page. Pages are 1-indexed and an
    empty page marks the end of the listing.
    """

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token, per_page=PER_PAGE)
        self._repositories: dict[str, Repository] = {}
        self._issues: dict[tuple[str, int], Issue] = {}

    def _convert_user(self, github_user: NamedUser | Organization) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(
            login=github_user.login,
            id=github_user.id,
            type=getattr(github_user, "type", None) or "User",
        )

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(name=github_label.name)

    def _convert_comment(self, github_comment: IssueComment) -> GitHubComment:
        """Convert PyGitHub comment to our model."""
        user = None
        if github_comment.user is not None:
            user = self._convert_user(github_comment.user)
        return GitHubComment(
            id=github_comment.id,
            user=user,
            created_at=github_comment.created_at,
        )

    def _convert_event(self, github_event: IssueEvent) -> GitHubIssueEvent:
        """Convert PyGitHub issue event to our model."""
        actor = None
        if github_event.actor is not None:
            actor = self._convert_user(github_event.actor)
        return GitHubIssueEvent(
            id=github_event.id,
            actor=actor,
            event=github_event.event,
            created_at=github_event.created_at,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        # Issues opened by deleted accounts are attributed to GitHub's ghost user
        if github_issue.user is not None:
            user = self._convert_user(github_issue.user)
        else:
            user = GitHubUser(login=GHOST_LOGIN, id=0)
        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            user=user,
            labels=[self._convert_label(label) for label in github_issue.labels],
            updated_at=github_issue.updated_at,
            is_pull_request=github_issue.pull_request is not None,
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object, fetching it once per client."""
        full_name = f"{org}/{repo}"
        if full_name not in self._repositories:
            try:
                self._repositories[full_name] = self.github.get_repo(full_name)
            except UnknownObjectException:
                raise ValueError(f"Repository {full_name} not found")
        return self._repositories[full_name]

    def _get_issue(self, org: str, repo: str, issue_number: int) -> Issue:
        # Issues seen while listing are reused so writes need no extra lookup
        key = (f"{org}/{repo}", issue_number)
        if key not in self._issues:
            repository = self.get_repository(org, repo)
            self._issues[key] = repository.get_issue(issue_number)
        return self._issues[key]

    def list_open_issues(
        self, org: str, repo: str, page: int, labels: list[str] | None = None
    ) -> list[GitHubIssue]:
        """List one page of open issues and pull requests.

        Args:
            org: Organization name
            repo: Repository name
            page: 1-indexed page number
            labels: Only list issues carrying all of these labels

        Returns:
            Issues on the requested page, empty past the last page
        """
        repository = self.get_repository(org, repo)
        if labels:
            listing = repository.get_issues(state="open", labels=labels)
        else:
            listing = repository.get_issues(state="open")

        result = []
        for github_issue in listing.get_page(page - 1):
            self._issues[(f"{org}/{repo}", github_issue.number)] = github_issue
            result.append(self._convert_issue(github_issue))
        return result

    def list_comments(
        self, org: str, repo: str, issue_number: int, page: int
    ) -> list[GitHubComment]:
        """List one page of comments on an issue."""
        github_issue = self._get_issue(org, repo, issue_number)
        return [
            self._convert_comment(comment)
            for comment in github_issue.get_comments().get_page(page - 1)
        ]

    def list_events(
        self, org: str, repo: str, issue_number: int, page: int
    ) -> list[GitHubIssueEvent]:
        """List one page of lifecycle events on an issue."""
        github_issue = self._get_issue(org, repo, issue_number)
        return [
            self._convert_event(event)
            for event in github_issue.get_events().get_page(page - 1)
        ]

    def list_collaborators(self, org: str, repo: str, page: int) -> list[GitHubUser]:
        """List one page of repository collaborators."""
        repository = self.get_repository(org, repo)
        return [
            self._convert_user(user)
            for user in repository.get_collaborators().get_page(page - 1)
        ]

    def check_collaborator(self, org: str, repo: str, login: str) -> bool:
        """Check whether a user is a collaborator on the repository.

        A "not found" answer is a definitive negative, not an error.
        """
        repository = self.get_repository(org, repo)
        try:
            return bool(repository.has_in_collaborators(login))
        except UnknownObjectException:
            return False

    def add_comment(self, org: str, repo: str, issue_number: int, body: str) -> None:
        """Add a comment to an issue.

        Raises:
            GithubException: For any API error
        """
        github_issue = self._get_issue(org, repo, issue_number)
        github_issue.create_comment(body)
        logger.info("Added comment to issue #%s", issue_number)

    def add_label(self, org: str, repo: str, issue_number: int, label: str) -> None:
        """Add a label to an issue, keeping the labels it already has."""
        github_issue = self._get_issue(org, repo, issue_number)
        github_issue.add_to_labels(label)
        logger.info("Added label %r to issue #%s", label, issue_number)

    def close_issue(self, org: str, repo: str, issue_number: int) -> None:
        """Close an issue or pull request."""
        github_issue = self._get_issue(org, repo, issue_number)
        github_issue.edit(state="closed")
        logger.info("Closed issue #%s", issue_number)
