"""Standardized CLI option definitions for consistent shorthand mappings.

This module provides centralized option definitions to ensure consistent
shorthand options across all commands and prevent future drift.
"""

import typer

from ..config import (
    DEFAULT_DAYS_BEFORE_CLOSE,
    DEFAULT_DAYS_BEFORE_STALE,
    DEFAULT_OPERATIONS_PER_RUN,
    DEFAULT_STALE_LABEL,
)

# Target options
REPO_OPTION = typer.Option(
    ..., "--repo", "-r", help="Repository to triage as owner/name"
)

TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

ONLY_LABELS_OPTION = typer.Option(
    "",
    "--only-labels",
    "-l",
    help="Comma-separated labels an issue must all carry to be considered",
)

# Messages - an empty message disables that kind of item
STALE_ISSUE_MESSAGE_OPTION = typer.Option(
    "", "--stale-issue-message", help="Comment posted when marking an issue stale"
)

STALE_PR_MESSAGE_OPTION = typer.Option(
    "", "--stale-pr-message", help="Comment posted when marking a PR stale"
)

# Labels
STALE_ISSUE_LABEL_OPTION = typer.Option(
    DEFAULT_STALE_LABEL, "--stale-issue-label", help="Label marking stale issues"
)

STALE_PR_LABEL_OPTION = typer.Option(
    DEFAULT_STALE_LABEL, "--stale-pr-label", help="Label marking stale PRs"
)

EXEMPT_ISSUE_LABEL_OPTION = typer.Option(
    "", "--exempt-issue-label", help="Issues with this label are never touched"
)

EXEMPT_PR_LABEL_OPTION = typer.Option(
    "", "--exempt-pr-label", help="PRs with this label are never touched"
)

# Thresholds
DAYS_BEFORE_STALE_OPTION = typer.Option(
    DEFAULT_DAYS_BEFORE_STALE,
    "--days-before-stale",
    help="Days of inactivity before an item is marked stale",
)

DAYS_BEFORE_CLOSE_OPTION = typer.Option(
    DEFAULT_DAYS_BEFORE_CLOSE,
    "--days-before-close",
    help="Days of inactivity after being marked stale before closing",
)

OPERATIONS_PER_RUN_OPTION = typer.Option(
    DEFAULT_OPERATIONS_PER_RUN,
    "--operations-per-run",
    help="Maximum number of GitHub API operations per run",
)

# Last updated user filter
LAST_UPDATED_USER_TYPE_OPTION = typer.Option(
    "",
    "--last-updated-user-type",
    help="Only act when the last update came from a 'collaborator' "
    "or 'non-collaborator'",
)

EVENTS_OPTION = typer.Option(
    "",
    "--include-events",
    help="Comma-separated issue event kinds that count as updates "
    "(e.g. labeled,assigned)",
)

# Behavior options - control command behavior
DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Preview changes without applying them"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show debug logging")
