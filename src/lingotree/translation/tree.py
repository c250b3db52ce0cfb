"""Normalized translation document tree.

A parsed YAML/JSON document is normalized into branches and leaves:

* mappings become ``TranslationTree`` branches keyed by strings
* sequences become branches keyed by their decimal index (``"0"``, ``"1"``...)
* every other scalar becomes a ``str`` leaf: booleans render as ``"true"``/``"false"``,
  null as the empty string, anything else through ``str()``
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Union

import yaml

from lingotree.core.errors import DocumentConstructionError

TranslationNode = Union[str, "TranslationTree"]


class TranslationTree(Mapping[str, TranslationNode]):
    """Immutable branch node: a read-only mapping of segment to child node."""

    __slots__ = ("_children",)

    def __init__(self, children: Mapping[str, TranslationNode] | None = None) -> None:
        checked: dict[str, TranslationNode] = {}
        for key, child in (children or {}).items():
            if not isinstance(key, str):
                raise TypeError(f"Translation tree key must be str, got {type(key).__name__}")
            if not isinstance(child, (str, TranslationTree)):
                raise TypeError(
                    f"Unexpected node of type {type(child).__name__} at {key!r} in translation tree"
                )
            checked[key] = child
        self._children = MappingProxyType(checked)

    def __getitem__(self, key: str) -> TranslationNode:
        return self._children[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"TranslationTree({dict(self._children)!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a plain nested dict copy of the tree."""
        return {
            key: child.to_dict() if isinstance(child, TranslationTree) else child
            for key, child in self._children.items()
        }


def scalar_text(value: Any) -> str:
    """Render a scalar document value as its translation text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _normalize(value: Any) -> TranslationNode:
    if isinstance(value, Mapping):
        return TranslationTree(
            {scalar_text(key): _normalize(child) for key, child in value.items()}
        )
    if isinstance(value, (list, tuple)):
        return TranslationTree(
            {str(index): _normalize(child) for index, child in enumerate(value)}
        )
    return scalar_text(value)


def build_tree(data: Any) -> TranslationTree:
    """Normalize an already-parsed document into a ``TranslationTree``.

    ``None`` (an empty document) produces an empty tree. Any other top-level
    value that is not a mapping raises ``DocumentConstructionError``, as
    does a self-referencing structure.
    """
    if data is None:
        return TranslationTree()
    if not isinstance(data, Mapping):
        raise DocumentConstructionError(
            f"expected a mapping at document root, got {type(data).__name__}"
        )
    try:
        return TranslationTree(
            {scalar_text(key): _normalize(child) for key, child in data.items()}
        )
    except RecursionError as exc:
        # Self-referencing aliases such as ``a: &x [*x]``.
        raise DocumentConstructionError("document is recursive or nested too deeply") from exc


def parse_document(source: str | bytes) -> TranslationTree:
    """Parse YAML (or JSON) text into a ``TranslationTree``."""
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise DocumentConstructionError(str(exc)) from exc
    return build_tree(data)
