"""Explorer for extended glob patterns."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from pollwatch.patterns.basic_glob import BasicGlob
from pollwatch.patterns.expander import expand
from pollwatch.types.errors import GlobSyntaxError
from pollwatch.snapshot import Snapshot


@dataclass(frozen=True, slots=True)
class GlobExplorer:
    """Finds paths matching an extended glob pattern.

    The pattern is expanded into basic globs once, at construction, so a
    malformed pattern is rejected before any watching starts. ``{a,b}``
    alternation is supported on top of the basic glob syntax described in
    :mod:`pollwatch.patterns.basic_glob`.
    """

    argument: str
    patterns: tuple[BasicGlob, ...]

    @classmethod
    def from_cli_arg(cls, arg: str) -> GlobExplorer:
        """Expand and validate ``arg``.

        Raises:
            BraceExpansionError: If braces in ``arg`` are unbalanced.
            GlobSyntaxError: If an expanded pattern is not a valid basic glob.
        """
        compiled: list[BasicGlob] = []
        for pattern in sorted(expand(arg)):
            try:
                compiled.append(BasicGlob.compile(pattern))
            except GlobSyntaxError as e:
                raise GlobSyntaxError(
                    f"glob pattern '{pattern}' from '{arg}' is invalid: {e}",
                    pattern,
                    position=e.position,
                    argument=arg,
                ) from e
        logger.debug(f"Glob '{arg}' expands to {[p.pattern for p in compiled]}")
        return cls(argument=arg, patterns=tuple(compiled))

    def explore(self, snapshot: Snapshot) -> None:
        for pattern in self.patterns:
            for path in pattern.iter_matches():
                try:
                    mtime = Path(path).stat().st_mtime_ns
                except OSError:
                    # vanished between listing and stat
                    continue
                snapshot.found(path, mtime)
