"""Library configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class I18nConfig(BaseSettings):
    """Translation bundle configuration."""

    model_config = {"env_prefix": "LINGOTREE_I18N_"}

    bundles_dir: str = "config/i18n"
    default_locale: str = "en"
    separator: str = "."
    strict_interpolation: bool = True
