"""Build the actor history of an issue from its comments and events."""

import logging
from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..github_client.client import GitHubClient
from ..github_client.models import GitHubIssue
from .pagination import PageResult, drain_pages

logger = logging.getLogger(__name__)

COMMENTED = "commented"


class ActorEvent(BaseModel):
    """One update to an issue, attributed to the account that made it."""

    model_config = ConfigDict(frozen=True)

    actor: str = Field(..., description="Login of the acting account")
    kind: str = Field(..., description="'commented' or an issue event kind")
    occurred_at: datetime = Field(..., description="When the update happened")


class TimelineBuilder:
    """Turns comments and allow-listed events into ``ActorEvent`` lists."""

    def __init__(
        self,
        client: GitHubClient,
        org: str,
        repo: str,
        events_to_check: Iterable[str] = (),
        ignore_bots: bool = True,
    ) -> None:
        self.client = client
        self.org = org
        self.repo = repo
        self.events_to_check = frozenset(events_to_check)
        self.ignore_bots = ignore_bots

    @property
    def includes_events(self) -> bool:
        return bool(self.events_to_check)

    def comment_timeline(self, issue: GitHubIssue) -> PageResult[ActorEvent]:
        comments = drain_pages(
            lambda page: self.client.list_comments(
                self.org, self.repo, issue.number, page
            )
        )
        events = [
            ActorEvent(
                actor=comment.user.login,
                kind=COMMENTED,
                occurred_at=comment.created_at,
            )
            for comment in comments.items
            if comment.user is not None
            and not (self.ignore_bots and comment.user.is_bot)
        ]
        return PageResult(items=events, operations=comments.operations)

    def event_timeline(self, issue: GitHubIssue) -> PageResult[ActorEvent]:
        raw_events = drain_pages(
            lambda page: self.client.list_events(
                self.org, self.repo, issue.number, page
            )
        )
        events = []
        for event in raw_events.items:
            if event.actor is None:
                continue
            if self.ignore_bots and event.actor.is_bot:
                continue
            if event.event not in self.events_to_check:
                continue
            # For (un)assigned events GitHub may report the assignee here
            # instead of the assigner. Passed through as reported.
            actor = event.actor.login
            events.append(
                ActorEvent(actor=actor, kind=event.event, occurred_at=event.created_at)
            )
        logger.debug(
            "Issue #%s: kept %d of %d event(s)",
            issue.number,
            len(events),
            len(raw_events.items),
        )
        return PageResult(items=events, operations=raw_events.operations)

    def merged_timeline(
        self, issue: GitHubIssue, include_events: bool | None = None
    ) -> PageResult[ActorEvent]:
        """Comments first, followed by events when ``include_events`` is set.

        ``include_events`` defaults to whether any event kind is allow-listed.
        """
        if include_events is None:
            include_events = self.includes_events

        timeline = self.comment_timeline(issue)
        if include_events:
            events = self.event_timeline(issue)
            timeline.items.extend(events.items)
            timeline.operations += events.operations
        logger.debug(
            "Issue #%s: timeline has %d entries", issue.number, len(timeline.items)
        )
        return timeline
