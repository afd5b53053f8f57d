"""Logging configuration for PingLens."""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOG_LEVEL_ENV = "PINGLENS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level: Optional[str] = None) -> int:
    """Configure application-wide logging.

    The level comes from the argument when given, otherwise from the
    PINGLENS_LOG_LEVEL environment variable (default: WARNING). Records go
    to stderr so they never mix with the report printed on stdout.

    Examples:
        # Show the ping command line and phase changes
        $ PINGLENS_LOG_LEVEL=DEBUG pinglens 8.8.8.8

    Returns:
        The numeric level that was applied
    """
    level_str = (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    log_level = LOG_LEVELS.get(level_str, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s", logging.getLevelName(log_level)
    )
    return log_level
