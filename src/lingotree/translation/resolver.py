"""Key-path translation lookup over a normalized document tree."""

from __future__ import annotations

import logging
from pathlib import Path

from lingotree.core.errors import KeyNotFoundError
from lingotree.core.protocols import PropertySource
from lingotree.translation.tree import TranslationTree, parse_document

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "."


class DocumentTranslator:
    """Translator resolving keys by walking a ``TranslationTree``.

    The key is split on ``separator`` into path segments and each segment is
    looked up in the current branch. Only a path that ends exactly on a leaf
    string succeeds; stopping at a branch, hitting a leaf early, or a missing
    segment all raise ``KeyNotFoundError``. An empty separator treats the
    whole key as a single segment.

    Args:
        tree: Normalized translation tree.
        separator: Key path separator. Defaults to ``"."``.
    """

    def __init__(self, tree: TranslationTree, separator: str = DEFAULT_SEPARATOR) -> None:
        self._tree = tree
        self._separator = separator

    @classmethod
    def from_text(
        cls, source: str | bytes, separator: str = DEFAULT_SEPARATOR
    ) -> DocumentTranslator:
        """Build a translator from YAML or JSON text."""
        return cls(parse_document(source), separator=separator)

    @classmethod
    def from_path(
        cls, path: str | Path, separator: str = DEFAULT_SEPARATOR
    ) -> DocumentTranslator:
        """Build a translator from a YAML or JSON file."""
        return cls.from_text(Path(path).read_bytes(), separator=separator)

    @property
    def tree(self) -> TranslationTree:
        return self._tree

    @property
    def separator(self) -> str:
        return self._separator

    def split_key(self, key: str) -> list[str]:
        if not self._separator:
            return [key]
        return key.split(self._separator)

    def translate(self, key: str, properties: PropertySource) -> str:
        node: TranslationTree | str = self._tree
        segments = self.split_key(key)
        for depth, segment in enumerate(segments):
            if not isinstance(node, TranslationTree):
                # Leaf reached with segments left over.
                logger.debug("Key %r runs past leaf at depth %d", key, depth)
                raise KeyNotFoundError(key)
            if segment not in node:
                logger.debug("Key %r has no segment %r", key, segment)
                raise KeyNotFoundError(key)
            node = node[segment]

        if isinstance(node, TranslationTree):
            logger.debug("Key %r resolves to a branch, not a translation", key)
            raise KeyNotFoundError(key, "incomplete path")
        return node
