"""Translation catalogue and resolver shared by the installer front-ends."""

from .catalog import (
    DEFAULT_LOCALE,
    Catalog,
    CatalogError,
    available_locales,
    build_catalog,
    bundle_for,
    load_catalog,
    normalise_locale,
)
from .diagnostics import EventKind, EventRecorder, ResolutionEvent, logging_hook
from .resolver import Resolution, Resolver, Translator, has_key, resolve, resolve_detailed

__all__ = [
    "DEFAULT_LOCALE",
    "Catalog",
    "CatalogError",
    "EventKind",
    "EventRecorder",
    "Resolution",
    "ResolutionEvent",
    "Resolver",
    "Translator",
    "available_locales",
    "build_catalog",
    "bundle_for",
    "has_key",
    "load_catalog",
    "logging_hook",
    "normalise_locale",
    "resolve",
    "resolve_detailed",
]
