"""Loguru setup for applications embedding the editor.

Library modules never configure logging; they just ``from loguru import logger``.
An application calls :func:`configure_logging` once at startup:

    >>> from geodraw.common.logging import configure_logging
    >>> configure_logging(verbose=True)

Mode transitions and saves are logged at INFO, per-edit bookkeeping
(validation results, history eviction) at DEBUG.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

LOG_FORMAT = (
    "<level>{level: <7}</level>| "
    "<dim><cyan>{file}:{line}</cyan></dim> | "
    "<level>{message}</level>"
)


def configure_logging(verbose: bool = False, log_file: str | Path | None = None) -> None:
    """Replace all loguru sinks with a stderr sink (and optionally a file).

    Calling it again replaces the sinks installed by the previous call.

    Args:
        verbose: DEBUG level with backtraces when True, INFO otherwise.
        log_file: Extra plain-text sink at the same level.
    """
    level = "DEBUG" if verbose else "INFO"
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )
    if log_file is not None:
        logger.add(str(log_file), format=LOG_FORMAT, level=level, colorize=False)

    logger.level("DEBUG", color="<dim><white>")
    logger.level("WARNING", color="<fg #ffff00><bold>")

