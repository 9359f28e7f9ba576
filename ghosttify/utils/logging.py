"""Logging setup for ghosttify.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and the CLI calls setup_logging() once to attach a stderr handler to the
package logger.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "ghosttify"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    level: Optional[str] = None,
) -> logging.Logger:
    """Configure the ghosttify logger.

    Args:
        verbose: Log DEBUG and up
        quiet: Log ERROR and up
        level: Explicit level name (GHOSTTIFY_LOG_LEVEL), used when neither
            flag is given

    Returns:
        The package logger
    """
    if verbose:
        resolved = logging.DEBUG
    elif quiet:
        resolved = logging.ERROR
    else:
        resolved = logging.getLevelName((level or "WARNING").upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(resolved)
    for handler in logger.handlers:
        handler.setLevel(resolved)

    return logger
