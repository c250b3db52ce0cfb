"""Locale bundle engine."""

from lingotree.i18n.engine import I18nEngine

__all__ = ["I18nEngine"]
