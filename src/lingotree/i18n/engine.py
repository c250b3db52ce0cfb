"""i18n engine: loads per-locale translation bundles and renders keys."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from lingotree.core.config import I18nConfig
from lingotree.core.errors import DocumentConstructionError, KeyNotFoundError
from lingotree.core.protocols import PropertySource, Translator
from lingotree.interpolation.interpolator import NoErrorInterpolator, PlaceholderInterpolator
from lingotree.properties.sources import ChainPropertySource, MapPropertySource
from lingotree.translation.composition import InterpolatedTranslator
from lingotree.translation.resolver import DocumentTranslator
from lingotree.translation.tree import TranslationTree, scalar_text

logger = logging.getLogger(__name__)

_BUNDLE_SUFFIXES = (".yml", ".yaml", ".json")


class I18nEngine:
    """Internationalization engine.

    Loads translation bundles from a directory (one file per locale, the file
    stem naming the locale) and resolves dot-notation keys with fallback to
    the default locale, then to the key itself.

    Args:
        bundles_dir: Directory holding the bundles. Defaults to
            ``config.bundles_dir``.
        default_locale: Locale consulted when a key is missing from the
            requested one. Defaults to ``config.default_locale``.
        separator: Key path separator. Defaults to ``config.separator``.
        config: I18nConfig instance. Defaults to I18nConfig() which reads
            from environment variables.
    """

    def __init__(
        self,
        bundles_dir: str | Path | None = None,
        default_locale: str | None = None,
        separator: str | None = None,
        config: I18nConfig | None = None,
    ) -> None:
        self._config = config or I18nConfig()
        self._bundles_dir = Path(bundles_dir or self._config.bundles_dir)
        self._default_locale = default_locale or self._config.default_locale
        self._separator = self._config.separator if separator is None else separator
        interpolator = PlaceholderInterpolator()
        self._interpolator = (
            interpolator if self._config.strict_interpolation else NoErrorInterpolator(interpolator)
        )
        self._translators: dict[str, DocumentTranslator] = {}
        self._load_bundles()

    def _load_bundles(self) -> None:
        if not self._bundles_dir.exists():
            logger.warning("Bundles directory %s does not exist", self._bundles_dir)
            return
        for path in sorted(self._bundles_dir.iterdir()):
            if path.suffix not in _BUNDLE_SUFFIXES:
                continue
            locale = path.stem
            if locale in self._translators:
                logger.warning("Ignoring duplicate bundle %s for locale %r", path, locale)
                continue
            try:
                translator = DocumentTranslator.from_path(path, separator=self._separator)
            except DocumentConstructionError as exc:
                raise DocumentConstructionError(f"{path}: {exc.detail}") from exc
            self._translators[locale] = translator
            logger.info("Loaded %d top-level keys for locale %r from %s",
                        len(translator.tree), locale, path)

    @property
    def locales(self) -> list[str]:
        return sorted(self._translators.keys())

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def get_bundle(self, locale: str) -> TranslationTree:
        translator = self._translators.get(locale)
        return translator.tree if translator else TranslationTree()

    def get_translator(self, locale: str | None = None) -> Translator | None:
        """Return the interpolating translator for *locale*, if loaded."""
        translator = self._translators.get(locale or self._default_locale)
        if translator is None:
            return None
        return InterpolatedTranslator(translator, self._interpolator)

    def t(
        self,
        key: str,
        locale: str | None = None,
        source: PropertySource | None = None,
        **properties: Any,
    ) -> str:
        """Translate a key and interpolate ``%{name}`` declarations.

        Falls back to default locale if key not found in requested locale.
        Falls back to the key itself if not found anywhere.

        Args:
            key: Separator-delimited path like "greetings.bye.night".
            locale: Target locale. Defaults to default_locale.
            source: Property source consulted after the keyword values. Use it
                for names that clash with this signature, such as ``key``.
            **properties: Interpolation values, stringified.

        Returns:
            Translated string.

        Raises:
            TranslationInterpolationError: A declaration without default names
                a missing property and interpolation is strict.
        """
        locale = locale or self._default_locale
        values = MapPropertySource({name: scalar_text(value) for name, value in properties.items()})
        if source is None:
            source = values
        elif properties:
            source = ChainPropertySource(values, source)

        candidates = [locale]
        if locale != self._default_locale:
            candidates.append(self._default_locale)
        for candidate in candidates:
            translator = self.get_translator(candidate)
            if translator is None:
                continue
            try:
                result = translator.translate(key, source)
            except KeyNotFoundError:
                continue
            if candidate != locale:
                logger.warning("Key %r missing in locale %r, used %r", key, locale, candidate)
            return result

        logger.debug("Key %r not found in any locale, returning key", key)
        return key
