"""Logging setup shared by the reqtree library and CLI.

Library modules obtain their logger with ``get_logger(__name__)`` and never
configure handlers themselves. CLI commands call ``setup_logging`` once,
before loading anything.
"""

import logging
import sys

LOGGER_NAME = "reqtree"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the reqtree logger hierarchy.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance for the module
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the reqtree root logger for command line use.

    Verbose wins over quiet when both are given.

    Args:
        verbose: Log DEBUG messages
        quiet: Only log errors
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    # Re-running setup (several CLI invocations in one process) replaces the
    # handler instead of stacking duplicates.
    for handler in list(root.handlers):
        if getattr(handler, "_reqtree_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._reqtree_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
