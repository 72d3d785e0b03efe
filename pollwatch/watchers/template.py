"""Command template substitution.

The command may reference ``$diff``, ``$path`` and ``$mtime`` (or their
braced forms ``${diff}`` ...). A placeholder preceded by a backslash is
escaped: the backslash is dropped and the placeholder stays as text.
An even run of backslashes escapes itself and leaves the placeholder live.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pollwatch.constants import TEMPLATE_VARIABLES, format_mtime
from pollwatch.snapshot import DiffKind, Difference

_NAMES = "|".join(TEMPLATE_VARIABLES)

# Bare names must not run into an identifier: $pathname is not $path.
_PLACEHOLDER = re.compile(
    rf"(?P<slashes>\\*)\$(?:\{{(?P<braced>{_NAMES})\}}|(?P<bare>{_NAMES})(?![A-Za-z0-9_]))"
)


@dataclass(frozen=True, slots=True)
class CommandTemplate:
    """The user's command, ready to be rendered for each Difference."""

    text: str

    @classmethod
    def from_tokens(cls, tokens: list[str]) -> CommandTemplate:
        return cls(" ".join(tokens))

    def variables(self, difference: Difference) -> dict[str, str]:
        """Values available for ``difference``.

        ``mtime`` is absent for deleted paths, which leaves ``$mtime``
        untouched in the rendered command.
        """
        values = {
            "diff": difference.kind.value,
            "path": difference.path or "",
        }
        if difference.mtime is not None and difference.kind is not DiffKind.DELETED:
            values["mtime"] = format_mtime(difference.mtime)
        return values

    def render(self, difference: Difference) -> str:
        """Substitute the details of ``difference`` into the command."""
        values = self.variables(difference)

        def replace(match: re.Match[str]) -> str:
            slashes = match.group("slashes")
            placeholder = match.group(0)[len(slashes):]
            if len(slashes) % 2 == 1:
                return slashes[:-1] + placeholder
            name = match.group("braced") or match.group("bare")
            if name not in values:
                return match.group(0)
            return slashes + values[name]

        return _PLACEHOLDER.sub(replace, self.text)


def build_command(command: str, difference: Difference) -> str:
    """Render ``command`` for ``difference``."""
    return CommandTemplate(command).render(difference)
