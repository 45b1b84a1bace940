"""Per-run accounting of remote GitHub operations."""

import logging

logger = logging.getLogger(__name__)


class OperationBudget:
    """Counts down the remote calls a run may still make.

    The remaining count only decreases. Callers charge the exact cost of a
    call after issuing it and check ``exhausted`` between issues.
    """

    def __init__(self, limit: int) -> None:
        if limit <= 0:
            raise ValueError(f"Operation budget must be positive, got {limit}")
        self.limit = limit
        self.remaining = limit

    @property
    def consumed(self) -> int:
        return self.limit - self.remaining

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def charge(self, operations: int) -> None:
        if operations < 0:
            raise ValueError(f"Cannot charge a negative cost: {operations}")
        self.remaining -= operations
        logger.debug(
            "Charged %d operation(s), %d of %d left",
            operations,
            self.remaining,
            self.limit,
        )

    def __repr__(self) -> str:
        return f"OperationBudget(remaining={self.remaining}, limit={self.limit})"
