"""Standard property source implementations."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from lingotree.core.errors import PropertyNotFoundError
from lingotree.core.protocols import PropertySource


class MapPropertySource:
    """Property source backed by a fixed mapping.

    The mapping is copied at construction so later changes to the caller's
    dict are not observed.
    """

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        self._properties: dict[str, str] = dict(properties or {})

    def lookup(self, name: str) -> str:
        try:
            return self._properties[name]
        except KeyError:
            raise PropertyNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)


class DefaultedPropertySource:
    """Wraps another source and answers with a fallback when it has no value."""

    def __init__(self, source: PropertySource, default: str) -> None:
        self._source = source
        self._default = default

    @property
    def default(self) -> str:
        return self._default

    def lookup(self, name: str) -> str:
        try:
            return self._source.lookup(name)
        except PropertyNotFoundError:
            return self._default


class FunctionPropertySource:
    """Adapts a plain callable to the PropertySource protocol."""

    def __init__(self, func: Callable[[str], str]) -> None:
        self._func = func

    def lookup(self, name: str) -> str:
        return self._func(name)


class ChainPropertySource:
    """Queries several sources in order; the first one that knows the name wins."""

    def __init__(self, *sources: PropertySource) -> None:
        self._sources = tuple(sources)

    def lookup(self, name: str) -> str:
        for source in self._sources:
            try:
                return source.lookup(name)
            except PropertyNotFoundError:
                continue
        raise PropertyNotFoundError(name)
