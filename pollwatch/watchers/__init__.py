"""Watchers module for change detection and command triggering."""

from pollwatch.watchers.template import CommandTemplate, build_command
from pollwatch.watchers.watcher import Watcher

__all__ = [
    "CommandTemplate",
    "Watcher",
    "build_command",
]
