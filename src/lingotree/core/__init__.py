"""Shared configuration, protocols and error types for lingotree."""

from lingotree.core.config import I18nConfig
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

__all__ = [
    "DocumentConstructionError",
    "I18nConfig",
    "InterpolationError",
    "Interpolator",
    "KeyNotFoundError",
    "LingotreeError",
    "PropertyNotFoundError",
    "PropertySource",
    "Translatable",
    "TranslationError",
    "TranslationInterpolationError",
    "Translator",
]
