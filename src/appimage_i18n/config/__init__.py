"""Configuration helpers for the localization layer."""

from .settings import (
    ConfigurationError,
    LocalizationSettings,
    build_resolver,
    load_settings,
)

__all__ = ["ConfigurationError", "LocalizationSettings", "build_resolver", "load_settings"]
