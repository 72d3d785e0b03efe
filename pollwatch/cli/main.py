"""pollwatch CLI.

Run a command when watched paths change. Paths are given as exact paths
(``--exact``) or extended glob patterns (``--glob``). Every ``interval``
seconds the paths are checked for new, deleted or modified (mtime) entries.
On a change the command runs through $SHELL and the watcher sleeps for
``sleep`` seconds before resuming.
"""

from __future__ import annotations

import sys

import click

from pollwatch import __version__
from pollwatch.config import WatchConfig
from pollwatch.constants import DEFAULT_INTERVAL, ENV_INTERVAL, ENV_LOG_LEVEL, ENV_SLEEP
from pollwatch.types.errors import PollwatchError
from pollwatch.utils.logger import configure_logging, logger
from pollwatch.watchers import Watcher

_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

_EPILOG = """\b
The command can use bash-like variables, substituted on each change:
  $diff  / ${diff}   one of new, modified, deleted
  $path  / ${path}   the watched path that changed
  $mtime / ${mtime}  last modified time (left as-is for deleted paths)
Prefix a variable with a backslash to keep it literal. Quote the command
in single quotes so your shell does not expand the variables first.

\b
Example:
  pollwatch -i 0.5 -s 10 -g '/etc/my-program/**' \\
      -e /usr/bin/my-program systemctl restart my-program.service
"""


@click.command(
    context_settings={
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    },
    epilog=_EPILOG,
)
@click.option(
    "-e",
    "--exact",
    "exact",
    multiple=True,
    metavar="PATH",
    type=click.Path(),
    help="Exact file path to watch. Repeatable.",
)
@click.option(
    "-g",
    "--glob",
    "globs",
    multiple=True,
    metavar="PATTERN",
    help="Extended glob pattern ({a,b} alternation) of paths to watch. Repeatable.",
)
@click.option(
    "-i",
    "--interval",
    type=float,
    default=DEFAULT_INTERVAL,
    show_default=True,
    envvar=ENV_INTERVAL,
    help="Seconds to wait between each non-differing check.",
)
@click.option(
    "-s",
    "--sleep",
    type=float,
    default=None,
    envvar=ENV_SLEEP,
    help="Seconds to sleep after the command ran. Defaults to --interval.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Report quiet checks and command details.",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    envvar=ENV_LOG_LEVEL,
    help="Log level (default INFO, DEBUG with --verbose).",
)
@click.version_option(version=__version__, prog_name="pollwatch", message="%(prog)s v%(version)s")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def cli(
    exact: tuple[str, ...],
    globs: tuple[str, ...],
    interval: float,
    sleep: float | None,
    verbose: bool,
    log_level: str | None,
    command: tuple[str, ...],
) -> None:
    """pollwatch - run COMMAND when watched paths change."""
    configure_logging(log_level or ("DEBUG" if verbose else None))

    try:
        config = WatchConfig.from_cli_args(
            exact=exact,
            globs=globs,
            command=command,
            interval=interval,
            sleep=sleep,
            verbose=verbose,
        )
    except PollwatchError as e:
        raise click.UsageError(e.get_formatted_message()) from e

    logger.debug(f"Command template: {config.command_text}")
    try:
        Watcher(config).watch()
    except KeyboardInterrupt:
        logger.info("Stopped")
        sys.exit(130)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="pollwatch")
