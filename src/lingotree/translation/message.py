"""Translatable messages: a key bundled with the properties it needs."""

from __future__ import annotations

from collections.abc import Mapping

from lingotree.core.protocols import PropertySource, Translator
from lingotree.properties.sources import MapPropertySource


class TranslatableMessage:
    """A message that renders itself with whatever translator it is given."""

    def __init__(
        self,
        key: str,
        properties: PropertySource | Mapping[str, str] | None = None,
    ) -> None:
        self.key = key
        if properties is None or isinstance(properties, Mapping):
            properties = MapPropertySource(properties)
        self.properties: PropertySource = properties

    def translate(self, translator: Translator) -> str:
        return translator.translate(self.key, self.properties)

    def __repr__(self) -> str:
        return f"TranslatableMessage(key={self.key!r})"
