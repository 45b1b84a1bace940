"""Resolve and classify the account that last updated an issue."""

from collections.abc import Sequence

from ..config import UserType
from .collaborators import CollaboratorCache
from .timeline import ActorEvent


def last_actor(timeline: Sequence[ActorEvent], fallback_author: str) -> str:
    """Return the actor of the latest event, or ``fallback_author`` if none.

    On equal timestamps the event that comes first in ``timeline`` wins.
    """
    latest: ActorEvent | None = None
    for event in timeline:
        if latest is None or event.occurred_at > latest.occurred_at:
            latest = event
    if latest is None:
        return fallback_author
    return latest.actor


def classify(actor: str, cache: CollaboratorCache) -> UserType:
    if cache.is_collaborator(actor):
        return UserType.COLLABORATOR
    return UserType.NON_COLLABORATOR
