"""Localization settings loaded from YAML and validated with pydantic."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from appimage_i18n.localization import (
    DEFAULT_LOCALE,
    Resolver,
    load_catalog,
    logging_hook,
)
from appimage_i18n.localization.catalog import DEFAULT_TRANSLATIONS_PACKAGE

_LOGGER = logging.getLogger(__name__)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SETTINGS_FILE = CONFIG_DIRECTORY / "localization.yaml"

SETTINGS_PATH_ENV = "APPIMAGE_I18N_SETTINGS"
DEFAULT_LOCALE_ENV = "APPIMAGE_I18N_DEFAULT_LOCALE"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class LocalizationSettings(ImmutableModel):
    """How the catalogue is sourced and how lookups are observed."""

    default_locale: str = DEFAULT_LOCALE
    translations_package: str = DEFAULT_TRANSLATIONS_PACKAGE
    log_events: bool = True
    log_level: str = "DEBUG"

    @field_validator("default_locale", "translations_package")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ConfigurationError("Localization settings require non-empty values")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{value}', expected one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _settings_path(path: Path | None) -> Path:
    if path is not None:
        return path
    override = os.getenv(SETTINGS_PATH_ENV)
    if override and override.strip():
        return Path(override.strip())
    return SETTINGS_FILE


@lru_cache(maxsize=4)
def load_settings(path: Path | None = None) -> LocalizationSettings:
    """Load and cache localization settings, applying environment overrides."""

    settings_path = _settings_path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Localization settings not found: {settings_path}")

    raw_settings = _load_yaml(settings_path).get("localization") or {}
    if not isinstance(raw_settings, dict):
        raise ConfigurationError("The 'localization' section must be a mapping")

    locale_override = os.getenv(DEFAULT_LOCALE_ENV)
    if locale_override is not None:
        if locale_override.strip():
            raw_settings = {**raw_settings, "default_locale": locale_override}
        else:
            _LOGGER.warning("Ignoring empty value for %s", DEFAULT_LOCALE_ENV)

    try:
        return LocalizationSettings.model_validate(raw_settings)
    except ValidationError as error:
        raise ConfigurationError(f"Localization settings validation failed: {error}") from error


def build_resolver(settings: LocalizationSettings | None = None) -> Resolver:
    """Wire the packaged catalogue and diagnostics into a resolver."""

    active = settings or load_settings()
    catalog = load_catalog(active.translations_package)

    if active.default_locale not in catalog:
        _LOGGER.warning(
            "Default locale '%s' has no bundle in %s; unresolved keys will render verbatim",
            active.default_locale,
            active.translations_package,
        )

    hook = logging_hook(level=active.log_level_number) if active.log_events else None
    return Resolver(catalog=catalog, default_locale=active.default_locale, on_event=hook)


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "DEFAULT_LOCALE_ENV",
    "LocalizationSettings",
    "SETTINGS_FILE",
    "SETTINGS_PATH_ENV",
    "build_resolver",
    "load_settings",
]
