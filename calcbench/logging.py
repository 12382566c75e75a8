"""Console logging for calcbench.

Log records go through a RichHandler writing to stderr, next to the rich
tables the CLI prints there.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "calcbench"


def config_console_handler(level: int = logging.WARNING, debug_mode: bool = False) -> RichHandler:
    """Configure and return a RichHandler for console output.

    In debug mode the handler drops to DEBUG and shows logger names and
    source paths.
    """
    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
    )
    fmt = "%(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


def setup_logging(level_name: str = "WARNING", debug_mode: bool = False) -> logging.Handler:
    """Attach a fresh console handler to the project logger.

    Replaces any handler installed by an earlier call, so repeated CLI
    invocations in one process do not duplicate output.
    """
    level_name = level_name.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logger = logging.getLogger(PROJECT_PREFIX)
    for old in list(logger.handlers):
        if isinstance(old, RichHandler):
            logger.removeHandler(old)

    handler = config_console_handler(level=level, debug_mode=debug_mode)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug_mode else level)
    logger.propagate = False
    return handler
