"""Stale issue triage engine."""

from .actor import classify, last_actor
from .budget import OperationBudget
from .collaborators import CollaboratorCache
from .engine import IssueDecision, TriageAction, TriageEngine, TriageSummary
from .pagination import PageResult, drain_pages
from .timeline import ActorEvent, TimelineBuilder

__all__ = [
    "ActorEvent",
    "CollaboratorCache",
    "IssueDecision",
    "OperationBudget",
    "PageResult",
    "TimelineBuilder",
    "TriageAction",
    "TriageEngine",
    "TriageSummary",
    "classify",
    "drain_pages",
    "last_actor",
]
