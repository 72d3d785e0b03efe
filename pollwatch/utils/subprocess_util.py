import os
import subprocess

from pollwatch.constants import DEFAULT_SHELL, ENV_SHELL
from pollwatch.types.errors import CommandLaunchError


def get_shell() -> str:
    """Shell used for triggered commands: $SHELL, or ``sh`` when unset."""
    return os.environ.get(ENV_SHELL) or DEFAULT_SHELL


def run_shell_command(command: str, shell: str | None = None) -> int:
    """Run ``command`` as ``<shell> -c <command>`` and wait for it.

    The child inherits this process's stdin, stdout and stderr, and its
    console on Windows.

    Returns:
        The child's exit status.

    Raises:
        CommandLaunchError: If the shell could not be started.
    """
    shell = shell or get_shell()
    try:
        completed = subprocess.run([shell, "-c", command], check=False)
    except OSError as e:
        raise CommandLaunchError(
            f"could not start '{shell}': {e}", command, original_error=e
        ) from e
    return completed.returncode
