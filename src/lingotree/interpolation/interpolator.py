"""Interpolators substituting placeholder declarations from a property source."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from lingotree.core.errors import InterpolationError, PropertyNotFoundError
from lingotree.core.protocols import Interpolator, PropertySource
from lingotree.interpolation.grammar import PLACEHOLDER_PATTERN, find_declarations

logger = logging.getLogger(__name__)


class PlaceholderInterpolator:
    """Interpolates ``%{name}`` and ``%{name|default}`` declarations.

    Each declaration is resolved against the property source in the order it
    appears. When a property is missing the declaration's default is used
    verbatim; without a default the whole interpolation fails on the first
    such declaration and later ones are never looked up.

    Args:
        pattern: Compiled pattern with ``name`` and ``default`` groups.
            Defaults to the standard placeholder grammar.
    """

    def __init__(self, pattern: re.Pattern[str] | None = None) -> None:
        self._pattern = pattern or PLACEHOLDER_PATTERN

    def interpolate(self, template: str, properties: PropertySource) -> str:
        resolved: dict[str, str] = {}
        for declaration in find_declarations(template, self._pattern):
            try:
                value = properties.lookup(declaration.name)
            except PropertyNotFoundError as exc:
                if not declaration.has_default:
                    raise InterpolationError(template, declaration.name, str(exc)) from exc
                value = declaration.default
            resolved.setdefault(declaration.literal, value)

        # Single pass: substituted values are never scanned again.
        return self._pattern.sub(lambda match: resolved[match.group(0)], template)


class NoErrorInterpolator:
    """Wraps an interpolator and returns the original template when it fails."""

    def __init__(self, interpolator: Interpolator) -> None:
        self._interpolator = interpolator

    def interpolate(self, template: str, properties: PropertySource) -> str:
        try:
            return self._interpolator.interpolate(template, properties)
        except InterpolationError as exc:
            logger.debug("Interpolation suppressed, returning raw template: %s", exc)
            return template


class FunctionInterpolator:
    """Adapts a plain callable to the Interpolator protocol."""

    def __init__(self, func: Callable[[str, PropertySource], str]) -> None:
        self._func = func

    def interpolate(self, template: str, properties: PropertySource) -> str:
        return self._func(template, properties)
