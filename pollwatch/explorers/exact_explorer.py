"""Explorer for one literal filesystem path."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from pollwatch.snapshot import Snapshot


@dataclass(frozen=True, slots=True)
class ExactExplorer:
    """Watches a single path, file or directory.

    The path does not need to exist: while it is missing it simply
    contributes nothing to the snapshot.
    """

    path: str

    @classmethod
    def from_cli_arg(cls, arg: str) -> ExactExplorer:
        return cls(path=arg)

    def explore(self, snapshot: Snapshot) -> None:
        try:
            mtime = Path(self.path).stat().st_mtime_ns
        except OSError as e:
            logger.trace(f"Exact path not visible: {self.path} ({e})")
            return
        snapshot.found(self.path, mtime)
