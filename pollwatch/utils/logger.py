"""
Logging utility for pollwatch.

All log output goes to STDERR so that the triggered command keeps STDOUT
to itself. The level comes from the CLI, or from the POLLWATCH_LOG
environment variable, and DEBUG=true forces debug output.
"""

import os
import sys

from loguru import logger as loguru_logger

from pollwatch.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> "
    "<level>{level: <8}</level> "
    "<level>{message}</level>"
)

DEBUG_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> "
    "<level>{message}</level>"
)


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get("DEBUG", "").lower() == "true"


def resolve_log_level(level: str | None = None) -> str:
    """Pick the effective log level.

    Precedence: DEBUG=true, then the explicit ``level``, then
    $POLLWATCH_LOG, then INFO.
    """
    if is_debug_enabled():
        return "DEBUG"
    chosen = level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    return chosen.upper()


def configure_logging(level: str | None = None) -> str:
    """Replace loguru's default sink with a STDERR sink.

    Returns:
        The level that was applied.
    """
    resolved = resolve_log_level(level)
    verbose = resolved in ("TRACE", "DEBUG")
    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level=resolved,
        format=DEBUG_LOG_FORMAT if verbose else LOG_FORMAT,
        backtrace=verbose,
        diagnose=False,
    )
    return resolved


# Export loguru logger for direct use
logger = loguru_logger
