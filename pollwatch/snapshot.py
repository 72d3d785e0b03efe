"""Watched filesystem state and the single-change diff.

A Snapshot holds every (path, mtime) fact collected in one poll cycle.
Comparing two snapshots yields exactly one Difference: the first change
found, or ``UNCHANGED``. When several paths changed at once, the others
surface on later cycles as the baseline advances.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator


class DiffKind(StrEnum):
    """Kind of change detected between two snapshots.

    The value of a non-unchanged kind is what ``$diff`` expands to.
    """

    UNCHANGED = "unchanged"
    NEW = "new"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class Difference:
    """The single change (or lack thereof) between two snapshots.

    ``mtime`` is in nanoseconds since the epoch. It is ``None`` for
    ``DELETED`` (a deleted path's last known time is not kept) and for
    ``UNCHANGED``.
    """

    kind: DiffKind
    path: str | None = None
    mtime: int | None = None

    @classmethod
    def new(cls, path: str, mtime: int) -> Difference:
        return cls(DiffKind.NEW, path, mtime)

    @classmethod
    def modified(cls, path: str, mtime: int) -> Difference:
        return cls(DiffKind.MODIFIED, path, mtime)

    @classmethod
    def deleted(cls, path: str) -> Difference:
        return cls(DiffKind.DELETED, path)

    @property
    def changed(self) -> bool:
        return self.kind is not DiffKind.UNCHANGED

    def describe(self) -> str:
        """Human readable summary used in log lines."""
        match self.kind:
            case DiffKind.NEW:
                return f"'{self.path}' is new"
            case DiffKind.MODIFIED:
                return f"'{self.path}' was modified"
            case DiffKind.DELETED:
                return f"'{self.path}' was deleted"
            case _:
                return "unchanged"


UNCHANGED = Difference(DiffKind.UNCHANGED)


class Snapshot:
    """Mapping of path -> last modified time (ns) for one poll cycle.

    Each explorer contributes to a snapshot exactly once per cycle. The
    snapshot then either gets discarded or becomes the baseline for the
    next cycle; comparing against it drains it.
    """

    __slots__ = ("_paths", "size_hint")

    def __init__(self, size_hint: int = 0, paths: dict[str, int] | None = None) -> None:
        # dicts cannot be presized; the hint only shows up in repr()
        self.size_hint = size_hint
        self._paths: dict[str, int] = dict(paths) if paths else {}

    def found(self, path: str, mtime: int) -> None:
        """Record that ``path`` exists and was last modified at ``mtime``."""
        self._paths[path] = mtime

    def get(self, path: str) -> int | None:
        return self._paths.get(path)

    def paths(self) -> Iterator[str]:
        return iter(self._paths)

    def items(self) -> Iterator[tuple[str, int]]:
        return iter(self._paths.items())

    def copy(self) -> Snapshot:
        return Snapshot(self.size_hint, self._paths)

    def compare(self, previous: Snapshot) -> Difference:
        """Compare this snapshot against ``previous``, draining it."""
        return compare(self, previous)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._paths == other._paths

    def __repr__(self) -> str:
        return f"Snapshot({len(self._paths)} paths, size_hint={self.size_hint})"

    def __str__(self) -> str:
        if not self._paths:
            return ""
        return "\n".join(self._paths) + "\n"


def compare(current: Snapshot, previous: Snapshot) -> Difference:
    """Return the first difference between ``current`` and ``previous``.

    ``previous`` is consumed: entries are popped from it while scanning,
    so it must not be used afterwards.

    Every path of ``current`` is looked up (and removed) in ``previous``:
    a missing path is NEW, a differing mtime is MODIFIED, and either
    returns immediately. Whatever is left in ``previous`` afterwards was
    not rediscovered and is reported as DELETED.
    """
    remaining = previous._paths
    for path, mtime in current._paths.items():
        previous_mtime = remaining.pop(path, None)
        if previous_mtime is None:
            return Difference.new(path, mtime)
        if previous_mtime != mtime:
            return Difference.modified(path, mtime)

    for path in remaining:
        return Difference.deleted(path)

    return UNCHANGED
