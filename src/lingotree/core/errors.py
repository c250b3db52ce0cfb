"""Exception hierarchy for translation lookup and interpolation."""

from __future__ import annotations


class LingotreeError(Exception):
    """Base class for every error raised by lingotree."""


class PropertyNotFoundError(LingotreeError, LookupError):
    """A property source has no value for the requested name."""

    def __init__(self, name: str, message: str = "property not available") -> None:
        self.name = name
        super().__init__(message)


class InterpolationError(LingotreeError, ValueError):
    """A template declares a property that could not be resolved."""

    def __init__(self, template: str, property_name: str, reason: str) -> None:
        self.template = template
        self.property_name = property_name
        super().__init__(f"interpolating {template!r}: {property_name!r}: {reason}")


class TranslationError(LingotreeError):
    """Base class for errors raised by translators.

    Fallback wrappers absorb this class and nothing else.
    """


class KeyNotFoundError(TranslationError, LookupError):
    """The key path does not lead to a leaf translation."""

    def __init__(self, key: str, reason: str = "not found") -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"translating {key!r}: {reason}")


class TranslationInterpolationError(TranslationError, InterpolationError):
    """Interpolation of a resolved translation failed."""

    def __init__(self, key: str, error: InterpolationError) -> None:
        self.key = key
        self.template = error.template
        self.property_name = error.property_name
        # Skip InterpolationError.__init__; the message wraps the inner one.
        LingotreeError.__init__(self, f"translating {key!r}: {error}")


class DocumentConstructionError(LingotreeError, ValueError):
    """A translation document could not be parsed into a tree."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"unmarshalling translations: {detail}")
