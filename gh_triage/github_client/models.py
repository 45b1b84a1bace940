"""Pydantic models for the GitHub data the triage engine reads.

These models map to a subset of GitHub's REST API v3 response structures.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

BOT_USER_TYPE = "Bot"
GHOST_LOGIN = "ghost"


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")
    type: str = Field(
        "User", description="Account type: 'User', 'Organization' or 'Bot'"
    )

    @property
    def is_bot(self) -> bool:
        return self.type == BOT_USER_TYPE


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the label (string)")


class GitHubComment(BaseModel):
    """GitHub comment model representing issue/PR comments.

    Maps to GitHub REST API Issue Comment object.
    API Reference: https://docs.github.com/en/rest/issues/comments
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique comment identifier (integer)")
    user: GitHubUser | None = Field(
        None, description="Comment author details, missing for deleted accounts"
    )
    created_at: datetime = Field(
        ..., description="Timestamp of comment creation (ISO 8601)"
    )


class GitHubIssueEvent(BaseModel):
    """GitHub issue event model representing lifecycle events.

    Maps to GitHub REST API Issue Event object. The actor is missing for
    events whose account was deleted.
    API Reference: https://docs.github.com/en/rest/issues/events
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique event identifier (integer)")
    actor: GitHubUser | None = Field(
        None, description="Account that triggered the event"
    )
    event: str = Field(..., description="Event kind, e.g. 'labeled', 'closed'")
    created_at: datetime = Field(
        ..., description="Timestamp of the event (ISO 8601)"
    )


class GitHubIssue(BaseModel):
    """GitHub issue model representing repository issues and pull requests.

    Snapshot taken when the open issues are listed. It is never updated
    locally after a write.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    user: GitHubUser = Field(..., description="Creator/author of the issue")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )
    is_pull_request: bool = Field(
        False, description="Whether the issue is a pull request"
    )

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]
