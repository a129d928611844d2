"""Logging for loc-analyzer.

Every module logs under the ``loc_analyzer`` namespace. Records are
rendered by rich on stderr, leaving stdout free for the report itself.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "loc_analyzer"


def _level_for(verbose: bool, quiet: bool) -> int:
    # --quiet beats --verbose when both are given
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Install a RichHandler on stderr and return the package logger.

    Warnings and errors are shown by default. ``verbose`` adds debug
    records with timestamps, source locations and local variables in
    tracebacks; ``quiet`` keeps errors only.
    """
    level = _level_for(verbose, quiet)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )

    # force=True: the CLI may run several times in one process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``, moved under the package namespace if needed."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
