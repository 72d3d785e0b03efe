"""Brace expansion for extended glob patterns.

Turns one extended glob pattern such as ``src/**/*.{py,pyi}`` into the set of
basic glob patterns it stands for (``src/**/*.py`` and ``src/**/*.pyi``).
Groups may nest to any depth and a backslash makes the next character a
plain literal. The backslash itself is kept so that the basic glob stage
still sees the escape.

Only the outermost group is split while scanning; the alternatives it
collects are expanded recursively when the group closes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import product
from typing import Union

from pollwatch.types.errors import BraceExpansionError


@dataclass(frozen=True, slots=True)
class Literal:
    """A single top-level character, e.g. ``a``."""

    char: str


@dataclass(slots=True)
class Alternatives:
    """A top-level ``{...}`` group.

    While the group is open, ``options`` holds the raw text of each
    alternative (``{a,{00,11}!}`` as ``["a", "{00,11}!"]``). Once closed it
    holds the fully expanded basic patterns.
    """

    options: list[str] = field(default_factory=lambda: [""])


Token = Union[Literal, Alternatives]


class _BraceScanner:
    """Left-to-right scanner building the token list for one pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.tokens: list[Token] = []
        self.depth = 0
        self.escaped = False
        self._group_start = 0

    def scan(self) -> list[Token]:
        for position, char in enumerate(self.pattern):
            self._character(char, position)

        if self.depth > 0:
            raise BraceExpansionError(
                f"unclosed '{{' opened at position {self._group_start}",
                self.pattern,
                position=self._group_start,
            )
        return self.tokens

    def _character(self, char: str, position: int) -> None:
        if self.escaped:
            self.escaped = False
            self._plain(char)
            return

        match char:
            case "\\":
                self.escaped = True
                self._plain(char)
            case "{":
                self._open(position)
            case "}":
                self._close(position)
            case ",":
                self._comma()
            case _:
                self._plain(char)

    def _plain(self, char: str) -> None:
        if self.depth == 0:
            self.tokens.append(Literal(char))
        else:
            self._current_group().options[-1] += char

    def _open(self, position: int) -> None:
        self.depth += 1
        if self.depth == 1:
            self._group_start = position
            self.tokens.append(Alternatives())
        else:
            self._current_group().options[-1] += "{"

    def _close(self, position: int) -> None:
        if self.depth == 0:
            raise BraceExpansionError(
                f"unmatched '}}' at position {position}",
                self.pattern,
                position=position,
            )

        self.depth -= 1
        if self.depth > 0:
            self._current_group().options[-1] += "}"
            return

        group = self._current_group()
        expanded: set[str] = set()
        for option in group.options:
            expanded.update(expand(option))
        group.options = sorted(expanded)

    def _comma(self) -> None:
        if self.depth == 0:
            self.tokens.append(Literal(","))
        elif self.depth == 1:
            self._current_group().options.append("")
        else:
            self._current_group().options[-1] += ","

    def _current_group(self) -> Alternatives:
        last = self.tokens[-1] if self.tokens else None
        if not isinstance(last, Alternatives):
            # depth > 0 guarantees an open group is the last token
            raise BraceExpansionError(
                "inconsistent brace nesting", self.pattern
            )
        return last


def tokenize(pattern: str) -> list[Token]:
    """Split an extended glob pattern into literals and expanded groups.

    Raises:
        BraceExpansionError: If braces are unbalanced.
    """
    return _BraceScanner(pattern).scan()


def expand(pattern: str) -> set[str]:
    """Expand every ``{a,b,...}`` group in ``pattern``.

    The result is the cartesian product of the literal runs and groups, in
    order. Duplicates collapse.

    Examples:
        >>> sorted(expand("{a,b}{1,2}"))
        ['a1', 'a2', 'b1', 'b2']
        >>> sorted(expand("a{b,{c,d}}"))
        ['ab', 'ac', 'ad']

    Raises:
        BraceExpansionError: If braces are unbalanced.
    """
    parts: list[list[str]] = []
    run: list[str] = []
    for token in tokenize(pattern):
        match token:
            case Literal(char=char):
                run.append(char)
            case Alternatives(options=options):
                if run:
                    parts.append(["".join(run)])
                    run = []
                parts.append(options)
    if run:
        parts.append(["".join(run)])

    return {"".join(combination) for combination in product(*parts)}
