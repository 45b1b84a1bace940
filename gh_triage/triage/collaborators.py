"""Run-scoped cache of repository collaborators."""

import logging

from ..github_client.client import GitHubClient
from .pagination import drain_pages

logger = logging.getLogger(__name__)


class CollaboratorCache:
    """Collaborator logins of one repository, listed at most once per run.

    An empty cache means "not known yet", so a repository whose listing
    comes back empty is listed again on the next ``ensure_loaded``.
    """

    def __init__(self, client: GitHubClient, org: str, repo: str) -> None:
        self.client = client
        self.org = org
        self.repo = repo
        self._logins: set[str] = set()
        self._probed: dict[str, bool] = {}

    def __len__(self) -> int:
        return len(self._logins)

    @property
    def logins(self) -> frozenset[str]:
        return frozenset(self._logins)

    def ensure_loaded(self) -> int:
        """List collaborators unless already cached.

        Returns:
            Operations consumed, 0 on a cache hit
        """
        if self._logins:
            return 0

        result = drain_pages(
            lambda page: self.client.list_collaborators(self.org, self.repo, page)
        )
        self._logins.update(user.login for user in result.items)
        logger.debug(
            "Loaded %d collaborator(s) for %s/%s in %d operation(s)",
            len(self._logins),
            self.org,
            self.repo,
            result.operations,
        )
        return result.operations

    def is_collaborator(self, login: str) -> bool:
        return login in self._logins

    def check_membership(self, login: str) -> tuple[bool, int]:
        """Ask GitHub directly whether ``login`` is a collaborator.

        Answers are remembered for the rest of the run.

        Returns:
            Tuple of (is_collaborator, operations consumed)
        """
        if login in self._probed:
            return self._probed[login], 0
        is_member = self.client.check_collaborator(self.org, self.repo, login)
        self._probed[login] = is_member
        return is_member, 1
