"""Label and age checks applied to issue snapshots."""

import unicodedata
from datetime import datetime, timedelta, timezone

from ..github_client.models import GitHubIssue

MILLISECONDS_PER_DAY = 86_400_000


def normalize_label(name: str) -> str:
    """Fold case and strip accents so that "Stalé" matches "stale"."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def labels_match(configured: str, actual: str) -> bool:
    return normalize_label(configured) == normalize_label(actual)


def is_labeled(issue: GitHubIssue, label: str) -> bool:
    return any(labels_match(label, name) for name in issue.label_names)


def was_last_updated_before(
    issue: GitHubIssue, days: int, now: datetime | None = None
) -> bool:
    """True when at least ``days`` whole days passed since the last update."""
    now = now or datetime.now(timezone.utc)
    updated_at = issue.updated_at
    if updated_at.tzinfo is None:
        updated_at = updated_at.replace(tzinfo=timezone.utc)
    return now - updated_at >= timedelta(milliseconds=MILLISECONDS_PER_DAY * days)
