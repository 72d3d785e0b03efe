"""Basic glob patterns: validation and filesystem enumeration.

A basic glob is what remains after brace expansion:

- ``?`` matches any single character
- ``*`` matches any run of characters except the path separator
- ``**`` matches the current directory and arbitrary subdirectories; it
  must form a whole path component, so ``**a`` and ``a**`` are invalid, as
  is any run of three or more ``*``
- ``[...]`` matches any character inside the brackets, ``[!...]`` any
  character not inside them. A ``]`` right after ``[`` or ``[!`` is part of
  the set. An unclosed bracket is invalid.
- ``\\`` makes the next character literal

Matching is delegated to :mod:`glob` once backslash escapes have been
rewritten into the bracket form it understands.
"""

from __future__ import annotations

import glob
from dataclasses import dataclass
from typing import Iterator

from pollwatch.types.errors import GlobSyntaxError

# Characters glob treats as wildcards; escaping them needs brackets.
_GLOB_MAGIC = frozenset("*?[")


def _class_end(pattern: str, start: int) -> int:
    """Return the index of the ``]`` closing the class opened at ``start``."""
    j = start + 1
    if j < len(pattern) and pattern[j] == "!":
        j += 1
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    end = pattern.find("]", j)
    if end == -1:
        raise GlobSyntaxError(
            f"unclosed character class at position {start}",
            pattern,
            position=start,
        )
    return end


def validate_basic_glob(pattern: str) -> None:
    """Check that ``pattern`` is a valid basic glob.

    Raises:
        GlobSyntaxError: Naming the pattern and the offending position.
    """
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "\\":
            if i + 1 >= n:
                raise GlobSyntaxError(
                    "trailing backslash escapes nothing", pattern, position=i
                )
            i += 2
            continue

        if char == "*":
            run_end = i
            while run_end < n and pattern[run_end] == "*":
                run_end += 1
            stars = run_end - i
            if stars > 2:
                raise GlobSyntaxError(
                    f"wildcards are either regular '*' or recursive '**' (position {i})",
                    pattern,
                    position=i,
                )
            if stars == 2:
                starts_component = i == 0 or pattern[i - 1] == "/"
                ends_component = run_end == n or pattern[run_end] == "/"
                if not (starts_component and ends_component):
                    raise GlobSyntaxError(
                        f"recursive wildcards must form a single path component (position {i})",
                        pattern,
                        position=i,
                    )
            i = run_end
            continue

        if char == "[":
            i = _class_end(pattern, i) + 1
            continue

        i += 1


def to_native_glob(pattern: str) -> str:
    """Rewrite backslash escapes into the form :mod:`glob` understands.

    ``\\*`` becomes ``[*]``; an escaped character with no glob meaning
    (``\\{``, ``\\,``) becomes the bare character. Character classes are
    copied through untouched.
    """
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "\\" and i + 1 < n:
            escaped = pattern[i + 1]
            out.append(f"[{escaped}]" if escaped in _GLOB_MAGIC else escaped)
            i += 2
        elif char == "[":
            end = _class_end(pattern, i)
            out.append(pattern[i : end + 1])
            i = end + 1
        else:
            out.append(char)
            i += 1
    return "".join(out)


@dataclass(frozen=True, slots=True)
class BasicGlob:
    """A validated basic glob pattern."""

    pattern: str
    native: str

    @classmethod
    def compile(cls, pattern: str) -> BasicGlob:
        """Validate ``pattern`` and prepare it for matching.

        Raises:
            GlobSyntaxError: If the pattern is not a valid basic glob.
        """
        validate_basic_glob(pattern)
        return cls(pattern=pattern, native=to_native_glob(pattern))

    def iter_matches(self) -> Iterator[str]:
        """Yield every existing path matching this pattern.

        Relative patterns resolve against the current working directory and
        yield relative paths. Hidden entries are included.
        """
        yield from glob.iglob(self.native, recursive=True, include_hidden=True)
