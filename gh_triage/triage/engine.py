"""Per-issue stale/close decisions for one repository run."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from ..config import TriageConfig, UserType
from ..github_client.client import GitHubClient
from ..github_client.models import GitHubIssue
from .actor import classify, last_actor
from .budget import OperationBudget
from .checks import is_labeled, was_last_updated_before
from .collaborators import CollaboratorCache
from .pagination import drain_pages
from .timeline import TimelineBuilder

logger = logging.getLogger(__name__)

MARK_STALE_OPERATIONS = 2
CLOSE_OPERATIONS = 1


class TriageAction(str, Enum):
    """Outcome of triaging a single issue."""

    MARKED_STALE = "marked-stale"
    CLOSED = "closed"
    EXEMPT = "exempt"
    SKIPPED = "skipped"


ACTING = frozenset({TriageAction.MARKED_STALE, TriageAction.CLOSED})


class IssueDecision(BaseModel):
    """What the engine did with one issue and why."""

    issue_number: int
    title: str
    is_pull_request: bool = False
    action: TriageAction
    reason: str
    operations: int = Field(0, description="Operations charged for this issue")


class TriageSummary(BaseModel):
    """Result of a full triage run."""

    repository: str
    issues_listed: int = 0
    decisions: list[IssueDecision] = Field(default_factory=list)
    operations_consumed: int = 0
    budget_exhausted: bool = False
    dry_run: bool = False

    def count(self, action: TriageAction) -> int:
        return sum(1 for decision in self.decisions if decision.action == action)

    @property
    def issues_unprocessed(self) -> int:
        return self.issues_listed - len(self.decisions)


class TriageEngine:
    """Walks the open issues of a repository and marks or closes stale ones.

    One engine serves one run. The collaborator cache and the operation
    budget are shared by every issue of that run.
    """

    def __init__(
        self,
        client: GitHubClient,
        config: TriageConfig,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.client = client
        self.config = config
        self._now = now or (lambda: datetime.now(timezone.utc))
        self.budget = OperationBudget(config.operations_per_run)
        self.collaborators = CollaboratorCache(client, config.org, config.repo)
        self.timeline = TimelineBuilder(
            client, config.org, config.repo, config.events_to_check
        )

    def list_issues(self) -> list[GitHubIssue]:
        result = drain_pages(
            lambda page: self.client.list_open_issues(
                self.config.org,
                self.config.repo,
                page,
                labels=self.config.only_labels or None,
            )
        )
        self.budget.charge(result.operations)
        return result.items

    def run(self) -> TriageSummary:
        """Triage every open issue until done or out of budget."""
        summary = TriageSummary(
            repository=self.config.repository, dry_run=self.config.dry_run
        )
        issues = self.list_issues()
        summary.issues_listed = len(issues)

        if not issues:
            logger.info("No open issues found with configured filter.")
        else:
            for issue in issues:
                if self.budget.exhausted:
                    logger.warning(
                        "Performed %d operations, exiting to avoid rate limit. "
                        "%d issue(s) left unprocessed.",
                        self.budget.consumed,
                        summary.issues_unprocessed,
                    )
                    summary.budget_exhausted = True
                    break
                summary.decisions.append(self.process_issue(issue))

        summary.operations_consumed = self.budget.consumed
        return summary

    def process_issue(self, issue: GitHubIssue) -> IssueDecision:
        before = self.budget.consumed
        action, reason = self._decide(issue)
        decision = IssueDecision(
            issue_number=issue.number,
            title=issue.title,
            is_pull_request=issue.is_pull_request,
            action=action,
            reason=reason,
            operations=self.budget.consumed - before,
        )
        log = logger.info if action in ACTING else logger.debug
        log("Issue #%s %s: %s", issue.number, action.value, reason)
        return decision

    def _decide(self, issue: GitHubIssue) -> tuple[TriageAction, str]:
        config = self.config
        kind = "pr" if issue.is_pull_request else "issue"
        logger.debug(
            "Found %s #%s: %s last updated %s",
            kind,
            issue.number,
            issue.title,
            issue.updated_at.isoformat(),
        )

        if issue.is_pull_request:
            message = config.stale_pr_message
            stale_label = config.stale_pr_label
            exempt_label = config.exempt_pr_label
        else:
            message = config.stale_issue_message
            stale_label = config.stale_issue_label
            exempt_label = config.exempt_issue_label

        if not message:
            return TriageAction.SKIPPED, f"no stale message configured for {kind}"

        if exempt_label and is_labeled(issue, exempt_label):
            return TriageAction.EXEMPT, f"has exempt label '{exempt_label}'"

        now = self._now()
        if is_labeled(issue, stale_label):
            if not was_last_updated_before(issue, config.days_before_close, now):
                return (
                    TriageAction.SKIPPED,
                    f"stale for less than {config.days_before_close} day(s)",
                )
            if not self.passes_user_type_filter(issue):
                return TriageAction.SKIPPED, "last updater does not match; not closing"
            self.close(issue)
            return (
                TriageAction.CLOSED,
                f"stale and inactive for {config.days_before_close}+ day(s)",
            )

        if was_last_updated_before(issue, config.days_before_stale, now):
            if not self.passes_user_type_filter(issue):
                return (
                    TriageAction.SKIPPED,
                    "last updater does not match; not marking stale",
                )
            self.mark_stale(issue, message, stale_label)
            return (
                TriageAction.MARKED_STALE,
                f"inactive for {config.days_before_stale}+ day(s)",
            )

        return (
            TriageAction.SKIPPED,
            f"updated within the last {config.days_before_stale} day(s)",
        )

    def passes_user_type_filter(self, issue: GitHubIssue) -> bool:
        """Check who last updated the issue against the configured user type.

        Passes without any remote call when no valid user type is set.
        """
        user_type = self.config.user_type_filter
        if user_type is None:
            logger.debug(
                "Last updated user type is not set or not valid. "
                "Skipping last updated user type filter."
            )
            return True

        self.budget.charge(self.collaborators.ensure_loaded())
        timeline = self.timeline.merged_timeline(issue)
        self.budget.charge(timeline.operations)

        actor = last_actor(timeline.items, issue.user.login)
        if len(self.collaborators):
            actor_type = classify(actor, self.collaborators)
        else:
            is_member, operations = self.collaborators.check_membership(actor)
            self.budget.charge(operations)
            actor_type = (
                UserType.COLLABORATOR if is_member else UserType.NON_COLLABORATOR
            )

        logger.debug(
            "Issue #%s last updated by %s (%s)",
            issue.number,
            actor,
            actor_type.value,
        )
        return actor_type == user_type

    def mark_stale(self, issue: GitHubIssue, message: str, label: str) -> None:
        """Comment on the issue, then add the stale label. No rollback."""
        logger.debug("Marking issue #%s %s as stale", issue.number, issue.title)
        if not self.config.dry_run:
            self.client.add_comment(
                self.config.org, self.config.repo, issue.number, message
            )
            self.client.add_label(self.config.org, self.config.repo, issue.number, label)
        self.budget.charge(MARK_STALE_OPERATIONS)

    def close(self, issue: GitHubIssue) -> None:
        logger.debug("Closing issue #%s %s for being stale", issue.number, issue.title)
        if not self.config.dry_run:
            self.client.close_issue(self.config.org, self.config.repo, issue.number)
        self.budget.charge(CLOSE_OPERATIONS)

