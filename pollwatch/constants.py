"""Shared constants and helpers for pollwatch.

Centralizes polling defaults, the shell fallback, substitution variable
names and mtime formatting.
"""

from datetime import datetime, timedelta, timezone

# Seconds between two checks that found no difference.
DEFAULT_INTERVAL: float = 0.1

# Shell used when $SHELL is unset.
DEFAULT_SHELL: str = "sh"

# Environment variables read by the CLI.
ENV_SHELL = "SHELL"
ENV_LOG_LEVEL = "POLLWATCH_LOG"
ENV_INTERVAL = "POLLWATCH_INTERVAL"
ENV_SLEEP = "POLLWATCH_SLEEP"

DEFAULT_LOG_LEVEL = "INFO"

# Names usable as $name or ${name} in the command template.
TEMPLATE_VARIABLES: tuple[str, ...] = ("diff", "path", "mtime")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def mtime_to_datetime(mtime_ns: int) -> datetime:
    """Convert a nanosecond mtime into an aware UTC datetime.

    Goes through ``timedelta`` rather than a float so that large
    timestamps keep their microseconds.
    """
    return _EPOCH + timedelta(microseconds=mtime_ns // 1000)


def format_mtime(mtime_ns: int) -> str:
    """Format a nanosecond mtime as ISO-8601 UTC with microseconds."""
    return mtime_to_datetime(mtime_ns).isoformat(timespec="microseconds")
