"""Drain paged GitHub listings into one ordered list."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    """Items gathered from a paged listing and the calls it took."""

    items: list[T] = field(default_factory=list)
    operations: int = 0


def drain_pages(fetch: Callable[[int], Sequence[T]]) -> PageResult[T]:
    """Fetch pages 1, 2, ... until one comes back empty.

    Every call counts as one operation, the final empty page included.
    Errors raised by ``fetch`` propagate and discard what was gathered.

    Args:
        fetch: Returns the items on a 1-indexed page

    Returns:
        PageResult with all items in fetch order
    """
    result: PageResult[T] = PageResult()
    page = 1
    while True:
        items = fetch(page)
        result.operations += 1
        page += 1
        if not items:
            return result
        result.items.extend(items)
