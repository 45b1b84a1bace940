"""Triage configuration, resolved once per run."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_DAYS_BEFORE_STALE = 60
DEFAULT_DAYS_BEFORE_CLOSE = 7
DEFAULT_OPERATIONS_PER_RUN = 30
DEFAULT_STALE_LABEL = "Stale"

NUMERIC_INPUTS = ("days-before-stale", "days-before-close", "operations-per-run")
REQUIRED_INPUTS = (
    "repo-token",
    "days-before-stale",
    "days-before-close",
    "stale-issue-label",
    "stale-pr-label",
    "operations-per-run",
)


class ConfigurationError(ValueError):
    """Raised when the run configuration is missing or invalid."""


class UserType(str, Enum):
    """Kinds of user the last-updated filter can require."""

    COLLABORATOR = "collaborator"
    NON_COLLABORATOR = "non-collaborator"

    @classmethod
    def parse(cls, value: str | None) -> "UserType | None":
        """Return the matching user type, or None for unset/unknown values."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


def _split_csv(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class TriageConfig(BaseModel):
    """Immutable settings for one triage run."""

    model_config = ConfigDict(frozen=True)

    repository: str = Field(..., description="Target repository as 'owner/name'")
    stale_issue_message: str = Field(
        "", description="Comment posted on stale issues; empty disables issues"
    )
    stale_pr_message: str = Field(
        "", description="Comment posted on stale PRs; empty disables PRs"
    )
    stale_issue_label: str = Field(DEFAULT_STALE_LABEL, min_length=1)
    stale_pr_label: str = Field(DEFAULT_STALE_LABEL, min_length=1)
    exempt_issue_label: str = ""
    exempt_pr_label: str = ""
    days_before_stale: int = Field(DEFAULT_DAYS_BEFORE_STALE, gt=0)
    days_before_close: int = Field(DEFAULT_DAYS_BEFORE_CLOSE, gt=0)
    operations_per_run: int = Field(DEFAULT_OPERATIONS_PER_RUN, gt=0)
    last_updated_user_type: str = Field(
        "", description="'collaborator', 'non-collaborator' or empty"
    )
    events_to_check: list[str] = Field(
        default_factory=list,
        description="Event kinds that count as an update by their actor",
    )
    only_labels: list[str] = Field(
        default_factory=list, description="Only list issues carrying these labels"
    )
    dry_run: bool = False

    @field_validator("repository")
    @classmethod
    def _validate_repository(cls, value: str) -> str:
        owner, _, name = value.partition("/")
        if not owner or not name or "/" in name:
            raise ValueError(f"repository must look like 'owner/name', got {value!r}")
        return value

    @field_validator("events_to_check", "only_labels", mode="before")
    @classmethod
    def _validate_csv(cls, value: Any) -> Any:
        return _split_csv(value)

    @property
    def org(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.repository.split("/", 1)[1]

    @property
    def user_type_filter(self) -> UserType | None:
        return UserType.parse(self.last_updated_user_type)


def build_config(**values: Any) -> TriageConfig:
    """Validate settings into a TriageConfig.

    Raises:
        ConfigurationError: If any setting is invalid
    """
    try:
        return TriageConfig(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e


def _get_input(environ: Mapping[str, str], name: str) -> str:
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return environ.get(key, "").strip()


def load_action_inputs(environ: Mapping[str, str]) -> tuple[TriageConfig, str]:
    """Read GitHub Actions inputs (``INPUT_<NAME>`` variables).

    Args:
        environ: Environment mapping, usually ``os.environ``

    Returns:
        Tuple of (config, repo_token)

    Raises:
        ConfigurationError: If a required input is missing or a numeric input
            does not parse
    """
    for name in REQUIRED_INPUTS:
        if not _get_input(environ, name):
            raise ConfigurationError(f"Input required and not supplied: {name}")

    numbers: dict[str, int] = {}
    for name in NUMERIC_INPUTS:
        try:
            numbers[name] = int(_get_input(environ, name))
        except ValueError:
            raise ConfigurationError(
                f"input {name} did not parse to a valid integer"
            ) from None

    repository = environ.get("GITHUB_REPOSITORY", "").strip()
    if not repository:
        raise ConfigurationError(
            "GITHUB_REPOSITORY is not set; run inside GitHub Actions or use "
            "'gh-triage run --repo owner/name'"
        )

    config = build_config(
        repository=repository,
        stale_issue_message=_get_input(environ, "stale-issue-message"),
        stale_pr_message=_get_input(environ, "stale-pr-message"),
        stale_issue_label=_get_input(environ, "stale-issue-label"),
        stale_pr_label=_get_input(environ, "stale-pr-label"),
        exempt_issue_label=_get_input(environ, "exempt-issue-label"),
        exempt_pr_label=_get_input(environ, "exempt-pr-label"),
        days_before_stale=numbers["days-before-stale"],
        days_before_close=numbers["days-before-close"],
        operations_per_run=numbers["operations-per-run"],
        last_updated_user_type=_get_input(environ, "last-updated-user-type"),
        events_to_check=_get_input(environ, "include-events-from-collaborators"),
        only_labels=_get_input(environ, "only-labels"),
        dry_run=_get_input(environ, "dry-run").lower() == "true",
    )
    return config, _get_input(environ, "repo-token")
