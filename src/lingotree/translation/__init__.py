"""Translation lookup, document trees and translator composition."""

from lingotree.translation.composition import (
    DefaultTranslator,
    FunctionTranslator,
    InterpolatedTranslator,
    KeyAsDefaultTranslator,
    build_translator,
)
from lingotree.translation.message import TranslatableMessage
from lingotree.translation.resolver import DEFAULT_SEPARATOR, DocumentTranslator
from lingotree.translation.tree import (
    TranslationNode,
    TranslationTree,
    build_tree,
    parse_document,
    scalar_text,
)

__all__ = [
    "DEFAULT_SEPARATOR",
    "DefaultTranslator",
    "DocumentTranslator",
    "FunctionTranslator",
    "InterpolatedTranslator",
    "KeyAsDefaultTranslator",
    "TranslatableMessage",
    "TranslationNode",
    "TranslationTree",
    "build_translator",
    "build_tree",
    "parse_document",
    "scalar_text",
]
