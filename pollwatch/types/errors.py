"""
Error handling system for pollwatch.

Provides structured error types with internal error codes, a user-facing
message and optional context. Startup errors (configuration, patterns)
propagate to the CLI, which reports them and exits; per-cycle errors are
absorbed by the watch loop.
"""

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Configuration Errors (1000-1999)
    INVALID_CONFIG = 1001
    MISSING_COMMAND = 1002
    NO_EXPLORERS = 1003
    INVALID_DURATION = 1004

    # Pattern Errors (2000-2999)
    INVALID_PATTERN = 2001
    INVALID_GLOB = 2002

    # Execution Errors (3000-3999)
    COMMAND_LAUNCH_FAILED = 3001


@dataclass
class ErrorContext:
    """What the error was about, shown under the user message."""

    pattern: str | None = None
    argument: str | None = None
    command: str | None = None


class PollwatchError(Exception):
    """Base error class for pollwatch."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [f"{self.user_message} ({self})"]

        if self.context.argument:
            parts.append(f"   Argument: {self.context.argument}")
        if self.context.pattern and self.context.pattern != self.context.argument:
            parts.append(f"   Pattern: {self.context.pattern}")
        if self.context.command:
            parts.append(f"   Command: {self.context.command}")

        return "\n".join(parts)


class ConfigurationError(PollwatchError):
    """Invalid watch configuration, detected before watching starts."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        code: ErrorCode = ErrorCode.INVALID_CONFIG,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Invalid configuration.",
            context=context,
            original_error=original_error,
        )


class PatternError(PollwatchError):
    """Base class for path pattern errors.

    ``argument`` is the command-line value the pattern came from, when it
    differs from the pattern itself (after brace expansion).
    """

    def __init__(
        self,
        message: str,
        pattern: str,
        code: ErrorCode = ErrorCode.INVALID_PATTERN,
        user_message: str | None = None,
        position: int | None = None,
        argument: str | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or f"Invalid pattern '{pattern}'.",
            context=ErrorContext(pattern=pattern, argument=argument),
        )
        self.pattern = pattern
        self.position = position


class BraceExpansionError(PatternError):
    """Unbalanced ``{`` / ``}`` in an extended glob pattern."""

    def __init__(self, message: str, pattern: str, position: int | None = None) -> None:
        super().__init__(
            message,
            pattern,
            code=ErrorCode.INVALID_PATTERN,
            user_message=f"Cannot expand braces in '{pattern}'.",
            position=position,
        )


class GlobSyntaxError(PatternError):
    """A basic glob pattern that cannot be matched against the filesystem."""

    def __init__(
        self,
        message: str,
        pattern: str,
        position: int | None = None,
        argument: str | None = None,
    ) -> None:
        super().__init__(
            message,
            pattern,
            code=ErrorCode.INVALID_GLOB,
            user_message=f"Glob pattern '{pattern}' is invalid.",
            position=position,
            argument=argument,
        )


class CommandLaunchError(PollwatchError):
    """The shell running the triggered command could not be started."""

    def __init__(
        self,
        message: str,
        command: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.COMMAND_LAUNCH_FAILED,
            message=message,
            user_message="Failed to launch command.",
            context=ErrorContext(command=command),
            original_error=original_error,
        )
        self.command = command
