"""Poll / diff / trigger loop.

Polling keeps this portable: every cycle re-runs the explorers into a fresh
snapshot and compares it against the previous one. On a change the command
template is rendered and run through the shell, then the loop sleeps for
``sleep`` instead of ``interval`` before resuming.

Everything runs on the calling thread; a hanging command blocks the loop.
"""

from __future__ import annotations

import time
from typing import Callable

from loguru import logger

from pollwatch.config import WatchConfig
from pollwatch.explorers import explore_all
from pollwatch.snapshot import Difference, Snapshot, compare
from pollwatch.types.errors import CommandLaunchError
from pollwatch.utils.subprocess_util import run_shell_command
from pollwatch.watchers.template import CommandTemplate

CommandRunner = Callable[[str], int]
Sleeper = Callable[[float], None]


class Watcher:
    """Runs a command whenever the watched paths change.

    Usage:
        config = WatchConfig.from_cli_args(globs=["src/**/*.py"], command=["make"])
        Watcher(config).watch()  # never returns

    ``sleeper`` and ``runner`` default to :func:`time.sleep` and
    :func:`run_shell_command`; tests swap them out to drive the loop.
    """

    def __init__(
        self,
        config: WatchConfig,
        sleeper: Sleeper | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize the watcher.

        Raises:
            ConfigurationError: If ``config`` is not runnable.
        """
        config.validate()
        self._config = config
        self._template = CommandTemplate.from_tokens(config.command)
        self._sleep = sleeper or time.sleep
        self._runner = runner or self._run_in_shell
        self._interval = config.interval
        self._trigger_sleep = config.effective_sleep
        self._no_change_count = 0

    @property
    def template(self) -> CommandTemplate:
        return self._template

    def explore(self, size_hint: int | None = None) -> Snapshot:
        """Take one snapshot by running every explorer once."""
        hint = len(self._config.explorers) if size_hint is None else size_hint
        snapshot = explore_all(self._config.explorers, Snapshot(hint))
        logger.trace(f"Explored {snapshot!r}")
        return snapshot

    def watch(self) -> None:
        """Watch forever. Only an exception or a signal stops it."""
        previous = self.explore()
        logger.info(
            f"Watching {len(previous)} paths from {len(self._config.explorers)} sources"
        )
        self._sleep(self._interval)

        while True:
            previous = self.poll(previous)

    def poll(self, previous: Snapshot) -> Snapshot:
        """Run one cycle against ``previous`` and return the new baseline.

        ``previous`` is consumed by the comparison.
        """
        current = self.explore(len(previous))
        difference = compare(current, previous)

        if difference.changed:
            self._on_change(difference)
            delay = self._trigger_sleep
        else:
            self._on_unchanged(current)
            delay = self._interval

        self._sleep(delay)
        return current

    def _on_unchanged(self, current: Snapshot) -> None:
        if not self._config.verbose:
            return
        if self._no_change_count == 0:
            logger.info(f"No changes in {len(current)} paths")
        self._no_change_count += 1

    def _on_change(self, difference: Difference) -> None:
        if self._no_change_count > 1:
            logger.debug(f"Change after {self._no_change_count} quiet checks")
        self._no_change_count = 0
        logger.info(difference.describe())
        self.trigger(difference)

    def trigger(self, difference: Difference) -> int | None:
        """Render the command for ``difference`` and run it.

        Returns:
            The command's exit status, or None if it could not be launched.
        """
        command = self._template.render(difference)
        logger.debug(f"Running: {command}")
        try:
            status = self._runner(command)
        except CommandLaunchError as e:
            logger.error(e.get_formatted_message())
            return None

        if status != 0:
            logger.warning(f"Command exited with status {status}")
        else:
            logger.debug("Command exited with status 0")
        return status

    def _run_in_shell(self, command: str) -> int:
        return run_shell_command(command, shell=self._config.shell)
