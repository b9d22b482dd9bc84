"""Console logging for the mdpost CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, once, by the CLI entry point.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


PROJECT_PREFIX = "mdpost"


def level_from_verbosity(verbose: int) -> int:
    """Map a -v count to a level: WARNING by default, INFO for -v, DEBUG for -vv."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def config_console_handler(level: int = logging.WARNING) -> RichHandler:
    """Return a RichHandler writing to stderr; DEBUG output includes source paths."""
    debug_mode = level <= logging.DEBUG
    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=False,
        show_path=debug_mode,
        rich_tracebacks=debug_mode,
    )
    fmt = "%(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


def configure_logging(verbose: int = 0) -> None:
    """Attach a single console handler to the project logger."""
    level = level_from_verbosity(verbose)
    logger = logging.getLogger(PROJECT_PREFIX)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(config_console_handler(level))
    logger.setLevel(level)
