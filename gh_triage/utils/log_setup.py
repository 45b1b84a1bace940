"""Logging configuration for CLI runs."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "gh_triage"


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Send gh_triage log records to the terminal through rich.

    Calling it again replaces the handler instead of stacking another one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
