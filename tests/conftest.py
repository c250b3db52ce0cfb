"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from lingotree.core.errors import KeyNotFoundError, PropertyNotFoundError


class RecordingPropertySource:
    """Property source that records every name it is asked for.

    Names in ``values`` resolve; any other name raises PropertyNotFoundError.
    """

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})
        self.lookups: list[str] = []

    def lookup(self, name: str) -> str:
        self.lookups.append(name)
        if name not in self.values:
            raise PropertyNotFoundError(name)
        return self.values[name]


class StubTranslator:
    """Translator that queries a marker property and then succeeds or fails."""

    def __init__(self, fail: bool = False, marker: str = "translator") -> None:
        self.fail = fail
        self.marker = marker
        self.seen_properties: list[object] = []

    def translate(self, key: str, properties) -> str:
        self.seen_properties.append(properties)
        try:
            properties.lookup(self.marker)
        except PropertyNotFoundError:
            pass
        if self.fail:
            raise KeyNotFoundError(key)
        return f"translated {key}"


@pytest.fixture
def recording_source():
    return RecordingPropertySource()
