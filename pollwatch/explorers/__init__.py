"""Path explorers: sources of (path, mtime) facts for a snapshot.

The set of explorers is closed: an exact path or an extended glob.
"""

from __future__ import annotations

from typing import Iterable, Union

from pollwatch.snapshot import Snapshot

from .exact_explorer import ExactExplorer
from .glob_explorer import GlobExplorer

Explorer = Union[ExactExplorer, GlobExplorer]


def explore_all(explorers: Iterable[Explorer], snapshot: Snapshot) -> Snapshot:
    """Run every explorer once against ``snapshot`` and return it."""
    for explorer in explorers:
        match explorer:
            case ExactExplorer() | GlobExplorer():
                explorer.explore(snapshot)
            case _:
                raise TypeError(f"Unknown explorer type: {type(explorer).__name__}")
    return snapshot


__all__ = [
    "ExactExplorer",
    "Explorer",
    "GlobExplorer",
    "explore_all",
]
