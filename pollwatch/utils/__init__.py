"""
pollwatch utility modules.

- Logging (loguru, STDERR sink)
- Shell command execution
"""

from .logger import configure_logging, is_debug_enabled, logger, resolve_log_level
from .subprocess_util import get_shell, run_shell_command

__all__ = [
    "configure_logging",
    "get_shell",
    "is_debug_enabled",
    "logger",
    "resolve_log_level",
    "run_shell_command",
]
