"""CLI commands that triage stale issues and pull requests."""

import os

import typer
from github.GithubException import GithubException
from rich.console import Console
from rich.table import Table

from ..config import ConfigurationError, TriageConfig, build_config, load_action_inputs
from ..github_client.client import GitHubClient
from ..triage.engine import TriageAction, TriageEngine, TriageSummary
from ..utils.log_setup import setup_logging
from .options import (
    DAYS_BEFORE_CLOSE_OPTION,
    DAYS_BEFORE_STALE_OPTION,
    DRY_RUN_OPTION,
    EVENTS_OPTION,
    EXEMPT_ISSUE_LABEL_OPTION,
    EXEMPT_PR_LABEL_OPTION,
    LAST_UPDATED_USER_TYPE_OPTION,
    ONLY_LABELS_OPTION,
    OPERATIONS_PER_RUN_OPTION,
    REPO_OPTION,
    STALE_ISSUE_LABEL_OPTION,
    STALE_ISSUE_MESSAGE_OPTION,
    STALE_PR_LABEL_OPTION,
    STALE_PR_MESSAGE_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()


def run(
    repo: str = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    stale_issue_message: str = STALE_ISSUE_MESSAGE_OPTION,
    stale_pr_message: str = STALE_PR_MESSAGE_OPTION,
    stale_issue_label: str = STALE_ISSUE_LABEL_OPTION,
    stale_pr_label: str = STALE_PR_LABEL_OPTION,
    exempt_issue_label: str = EXEMPT_ISSUE_LABEL_OPTION,
    exempt_pr_label: str = EXEMPT_PR_LABEL_OPTION,
    days_before_stale: int = DAYS_BEFORE_STALE_OPTION,
    days_before_close: int = DAYS_BEFORE_CLOSE_OPTION,
    operations_per_run: int = OPERATIONS_PER_RUN_OPTION,
    last_updated_user_type: str = LAST_UPDATED_USER_TYPE_OPTION,
    include_events: str = EVENTS_OPTION,
    only_labels: str = ONLY_LABELS_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Mark inactive issues and PRs stale, and close stale ones.

    An item kind (issue or PR) is only processed when its stale message is set.

    Examples:
        # Preview what would happen to issues idle for 30 days
        gh-triage run --repo myorg/myrepo --stale-issue-message "Still needed?" \\
            --days-before-stale 30 --dry-run

        # Only act on items a non-collaborator updated last
        gh-triage run --repo myorg/myrepo --stale-issue-message "Ping" \\
            --last-updated-user-type non-collaborator --include-events labeled
    """
    setup_logging(verbose)
    try:
        config = build_config(
            repository=repo,
            stale_issue_message=stale_issue_message,
            stale_pr_message=stale_pr_message,
            stale_issue_label=stale_issue_label,
            stale_pr_label=stale_pr_label,
            exempt_issue_label=exempt_issue_label,
            exempt_pr_label=exempt_pr_label,
            days_before_stale=days_before_stale,
            days_before_close=days_before_close,
            operations_per_run=operations_per_run,
            last_updated_user_type=last_updated_user_type,
            events_to_check=include_events,
            only_labels=only_labels,
            dry_run=dry_run,
        )
    except ConfigurationError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    _execute(config, token)


def action(verbose: bool = VERBOSE_OPTION) -> None:
    """Triage using GitHub Actions inputs (INPUT_* environment variables)."""
    setup_logging(verbose)
    try:
        config, token = load_action_inputs(os.environ)
    except ConfigurationError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    _execute(config, token)


def _execute(config: TriageConfig, token: str | None) -> None:
    _print_parameters(config)
    try:
        client = GitHubClient(token=token)
        summary = TriageEngine(client, config).run()
    except (ValueError, GithubException) as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n❌ [yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(1)

    _print_summary(summary)


def _print_parameters(config: TriageConfig) -> None:
    params_table = Table(title="Triage Parameters")
    params_table.add_column("Parameter", style="cyan")
    params_table.add_column("Value", style="green")

    params_table.add_row("Repository", config.repository)
    params_table.add_row("Days before stale", str(config.days_before_stale))
    params_table.add_row("Days before close", str(config.days_before_close))
    params_table.add_row("Operations per run", str(config.operations_per_run))
    if config.last_updated_user_type:
        params_table.add_row("Last updated user type", config.last_updated_user_type)
    if config.events_to_check:
        params_table.add_row("Events checked", ", ".join(config.events_to_check))
    if config.only_labels:
        params_table.add_row("Only labels", ", ".join(config.only_labels))

    console.print(params_table)
    if config.dry_run:
        console.print(
            "⚠️  [yellow]Dry run - no comments, labels or state changes "
            "will be applied[/yellow]"
        )


def _print_summary(summary: TriageSummary) -> None:
    if summary.decisions:
        table = Table(title=f"Triage Results for {summary.repository}")
        table.add_column("Number", style="cyan")
        table.add_column("Kind")
        table.add_column("Action", style="green")
        table.add_column("Reason")
        table.add_column("Ops", justify="right")
        for decision in summary.decisions:
            table.add_row(
                f"#{decision.issue_number}",
                "PR" if decision.is_pull_request else "Issue",
                decision.action.value,
                decision.reason,
                str(decision.operations),
            )
        console.print(table)

    console.print(
        f"📊 [blue]{summary.issues_listed} open item(s), "
        f"{summary.count(TriageAction.MARKED_STALE)} marked stale, "
        f"{summary.count(TriageAction.CLOSED)} closed, "
        f"{summary.operations_consumed} operation(s) used[/blue]"
    )
    if summary.budget_exhausted:
        console.print(
            f"⚠️  [yellow]Operation budget exhausted, {summary.issues_unprocessed} "
            f"item(s) left for the next run[/yellow]"
        )
