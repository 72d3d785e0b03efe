"""Error types shared across pollwatch."""

from .errors import (
    BraceExpansionError,
    CommandLaunchError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    GlobSyntaxError,
    PatternError,
    PollwatchError,
)

__all__ = [
    "BraceExpansionError",
    "CommandLaunchError",
    "ConfigurationError",
    "ErrorCode",
    "ErrorContext",
    "GlobSyntaxError",
    "PatternError",
    "PollwatchError",
]
