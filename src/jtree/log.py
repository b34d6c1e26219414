"""Logging setup for jtree."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for jtree.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose: INFO level
    - Debug (JTREE_DEBUG=1): DEBUG level - shows every rendered template
    """
    debug = bool(os.environ.get("JTREE_DEBUG"))

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("jtree")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
