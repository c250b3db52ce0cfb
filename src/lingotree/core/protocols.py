"""Protocol definitions for the single-method capabilities.

Any object with the matching method satisfies a protocol, so closures wrapped
by the ``Function*`` adapters, plain classes and decorators compose freely.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PropertySource(Protocol):
    """Resolves a property name to its string value.

    Raises ``PropertyNotFoundError`` when the name is unknown. Implementations
    must tolerate repeated lookups of the same name.
    """

    def lookup(self, name: str) -> str: ...


@runtime_checkable
class Interpolator(Protocol):
    """Replaces placeholder declarations in a template with property values.

    Raises ``InterpolationError`` when a declaration cannot be resolved.
    """

    def interpolate(self, template: str, properties: PropertySource) -> str: ...


@runtime_checkable
class Translator(Protocol):
    """Maps a key to a translation, raising ``TranslationError`` on failure."""

    def translate(self, key: str, properties: PropertySource) -> str: ...


@runtime_checkable
class Translatable(Protocol):
    """An object that renders itself into a string using a translator."""

    def translate(self, translator: Translator) -> str: ...
