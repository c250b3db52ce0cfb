"""Translator decorators and pipeline construction.

Every decorator forwards the property source it receives, unchanged, to the
components it wraps. Wrapping order matters: a ``DefaultTranslator`` around an
``InterpolatedTranslator`` also absorbs interpolation failures, while an
``InterpolatedTranslator`` around a ``DefaultTranslator`` interpolates the
fallback text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lingotree.core.errors import (
    InterpolationError,
    TranslationError,
    TranslationInterpolationError,
)
from lingotree.core.protocols import Interpolator, PropertySource, Translator
from lingotree.interpolation.interpolator import NoErrorInterpolator, PlaceholderInterpolator

logger = logging.getLogger(__name__)


class FunctionTranslator:
    """Adapts a plain callable to the Translator protocol."""

    def __init__(self, func: Callable[[str, PropertySource], str]) -> None:
        self._func = func

    def translate(self, key: str, properties: PropertySource) -> str:
        return self._func(key, properties)


class DefaultTranslator:
    """Returns a fixed fallback translation when the wrapped translator fails."""

    def __init__(self, translation: str, translator: Translator) -> None:
        self._translation = translation
        self._translator = translator

    def translate(self, key: str, properties: PropertySource) -> str:
        try:
            return self._translator.translate(key, properties)
        except TranslationError as exc:
            logger.debug("Using default translation for %r: %s", key, exc)
            return self._translation


class KeyAsDefaultTranslator:
    """Returns the lookup key itself when the wrapped translator fails."""

    def __init__(self, translator: Translator) -> None:
        self._translator = translator

    def translate(self, key: str, properties: PropertySource) -> str:
        try:
            return self._translator.translate(key, properties)
        except TranslationError as exc:
            logger.debug("Using key as translation for %r: %s", key, exc)
            return key


class InterpolatedTranslator:
    """Interpolates the wrapped translator's result.

    A translation failure propagates without calling the interpolator. An
    interpolation failure is re-raised as ``TranslationInterpolationError``
    carrying the key; the raw template is never returned.
    """

    def __init__(self, translator: Translator, interpolator: Interpolator) -> None:
        self._translator = translator
        self._interpolator = interpolator

    def translate(self, key: str, properties: PropertySource) -> str:
        template = self._translator.translate(key, properties)
        try:
            return self._interpolator.interpolate(template, properties)
        except InterpolationError as exc:
            raise TranslationInterpolationError(key, exc) from exc


def build_translator(
    translator: Translator,
    interpolator: Interpolator | None = None,
    *,
    strict_interpolation: bool = True,
    default: str | None = None,
    key_as_default: bool = False,
) -> Translator:
    """Compose a lookup-and-fill pipeline around a base translator.

    Layers are applied innermost first: interpolation, then the fallback.
    The fallback therefore also covers interpolation failures. ``default``
    wins over ``key_as_default`` when both are given.
    """
    interpolator = interpolator or PlaceholderInterpolator()
    if not strict_interpolation:
        interpolator = NoErrorInterpolator(interpolator)

    pipeline: Translator = InterpolatedTranslator(translator, interpolator)
    if default is not None:
        pipeline = DefaultTranslator(default, pipeline)
    elif key_as_default:
        pipeline = KeyAsDefaultTranslator(pipeline)
    return pipeline
