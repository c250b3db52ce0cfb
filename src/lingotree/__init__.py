"""lingotree: key-path translation lookup with placeholder interpolation.

Resolve a dotted key to a template held in a YAML/JSON document tree, then
fill ``%{name}`` and ``%{name|default}`` declarations from a property source.
Decorators layer fallback and interpolation behaviour over the lookup.
"""

from lingotree.core.errors import (
    DocumentConstructionError,
    InterpolationError,
    KeyNotFoundError,
    LingotreeError,
    PropertyNotFoundError,
    TranslationError,
    TranslationInterpolationError,
)
from lingotree.core.protocols import Interpolator, PropertySource, Translatable, Translator
from lingotree.i18n.engine import I18nEngine
from lingotree.interpolation import (
    FunctionInterpolator,
    NoErrorInterpolator,
    PlaceholderInterpolator,
)
from lingotree.properties import (
    ChainPropertySource,
    DefaultedPropertySource,
    FunctionPropertySource,
    MapPropertySource,
)
from lingotree.translation import (
    DefaultTranslator,
    DocumentTranslator,
    FunctionTranslator,
    InterpolatedTranslator,
    KeyAsDefaultTranslator,
    TranslatableMessage,
    TranslationTree,
    build_translator,
    build_tree,
    parse_document,
)

__version__ = "0.1.0"

__all__ = [
    "ChainPropertySource",
    "DefaultTranslator",
    "DefaultedPropertySource",
    "DocumentConstructionError",
    "DocumentTranslator",
    "FunctionInterpolator",
    "FunctionPropertySource",
    "FunctionTranslator",
    "I18nEngine",
    "InterpolatedTranslator",
    "InterpolationError",
    "Interpolator",
    "KeyAsDefaultTranslator",
    "KeyNotFoundError",
    "LingotreeError",
    "MapPropertySource",
    "NoErrorInterpolator",
    "PlaceholderInterpolator",
    "PropertyNotFoundError",
    "PropertySource",
    "Translatable",
    "TranslatableMessage",
    "TranslationError",
    "TranslationInterpolationError",
    "TranslationTree",
    "Translator",
    "build_translator",
    "build_tree",
    "parse_document",
]
