"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import (
    GitHubComment,
    GitHubIssue,
    GitHubIssueEvent,
    GitHubLabel,
    GitHubUser,
)

__all__ = [
    "GitHubClient",
    "GitHubUser",
    "GitHubLabel",
    "GitHubComment",
    "GitHubIssueEvent",
    "GitHubIssue",
]
