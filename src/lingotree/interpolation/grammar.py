"""Placeholder declaration grammar.

A declaration is ``%{name}`` or ``%{name|default}``:

* ``name`` is a non-empty run of characters other than ``}`` and ``|``
* ``default`` is a possibly empty run of characters other than ``}``

There is no escape sequence; anything matching the pattern is a declaration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

PLACEHOLDER_PATTERN = re.compile(r"%\{(?P<name>[^}|]+)(?:\|(?P<default>[^}]*))?\}")


@dataclass(frozen=True)
class Declaration:
    """A single placeholder occurrence found in a template."""

    literal: str
    name: str
    has_default: bool = False
    default: str = ""


def find_declarations(
    template: str, pattern: re.Pattern[str] = PLACEHOLDER_PATTERN
) -> list[Declaration]:
    """Return the non-overlapping declarations in *template*, left to right."""
    declarations: list[Declaration] = []
    for match in pattern.finditer(template):
        default = match.group("default")
        declarations.append(Declaration(
            literal=match.group(0),
            name=match.group("name"),
            has_default=default is not None,
            default=default or "",
        ))
    return declarations
