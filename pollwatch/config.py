"""Watch configuration.

Collects what the CLI parsed (explorers, timings, command tokens) and
validates it before the watch loop starts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from pollwatch.constants import DEFAULT_INTERVAL
from pollwatch.explorers import ExactExplorer, Explorer, GlobExplorer
from pollwatch.types.errors import ConfigurationError, ErrorCode


@dataclass
class WatchConfig:
    """Everything the watch loop needs.

    ``sleep`` defaults to ``interval`` when left as ``None``.
    """

    explorers: list[Explorer] = field(default_factory=list)
    command: list[str] = field(default_factory=list)
    interval: float = DEFAULT_INTERVAL
    sleep: float | None = None
    shell: str | None = None
    verbose: bool = False

    @classmethod
    def from_cli_args(
        cls,
        exact: Sequence[str] = (),
        globs: Sequence[str] = (),
        command: Sequence[str] = (),
        interval: float = DEFAULT_INTERVAL,
        sleep: float | None = None,
        shell: str | None = None,
        verbose: bool = False,
    ) -> WatchConfig:
        """Build explorers from raw arguments and validate the result.

        Raises:
            PatternError: If a glob argument is malformed.
            ConfigurationError: If the configuration is unusable.
        """
        explorers: list[Explorer] = [ExactExplorer.from_cli_arg(arg) for arg in exact]
        explorers.extend(GlobExplorer.from_cli_arg(arg) for arg in globs)
        config = cls(
            explorers=explorers,
            command=list(command),
            interval=interval,
            sleep=sleep,
            shell=shell,
            verbose=verbose,
        )
        config.validate()
        return config

    @property
    def effective_sleep(self) -> float:
        return self.interval if self.sleep is None else self.sleep

    @property
    def command_text(self) -> str:
        return " ".join(self.command)

    def validate(self) -> None:
        """Reject configurations the watch loop cannot run.

        Raises:
            ConfigurationError: On an empty command, a non-positive
                interval or sleep, or no explorers.
        """
        if not self.command or not self.command_text.strip():
            raise ConfigurationError(
                "No command was given",
                user_message="A command must be specified.",
                code=ErrorCode.MISSING_COMMAND,
            )
        if not _is_positive(self.interval):
            raise ConfigurationError(
                f"Interval must be a positive number of seconds, got {self.interval}",
                user_message="Invalid interval.",
                code=ErrorCode.INVALID_DURATION,
            )
        if not _is_positive(self.effective_sleep):
            raise ConfigurationError(
                f"Sleep must be a positive number of seconds, got {self.effective_sleep}",
                user_message="Invalid sleep.",
                code=ErrorCode.INVALID_DURATION,
            )
        if not self.explorers:
            raise ConfigurationError(
                "Empty path discovery list",
                user_message="Nothing to watch: pass at least one --exact or --glob.",
                code=ErrorCode.NO_EXPLORERS,
            )


def _is_positive(seconds: float) -> bool:
    return math.isfinite(seconds) and seconds > 0
