"""Translation catalogue helpers backed by packaged JSON bundles."""

from __future__ import annotations

import json
from functools import cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_LOCALE = "en"
DEFAULT_TRANSLATIONS_PACKAGE = "appimage_i18n.translations"

Bundle = Mapping[str, str]
Catalog = Mapping[str, Bundle]

_EMPTY_BUNDLE: Bundle = MappingProxyType({})


class CatalogError(ValueError):
    """Raised when a translation payload cannot be turned into a catalogue."""


def build_catalog(raw: Mapping[str, Any]) -> Catalog:
    """Return a read-only catalogue built from ``raw`` locale bundles.

    The input is copied, so mutating ``raw`` afterwards never leaks into the
    returned catalogue. Template values are coerced to ``str``; ``None``
    entries are dropped so lookups fall through to the default locale.
    """

    if not isinstance(raw, Mapping):
        raise CatalogError("Catalogue must map locales to bundles")

    bundles: dict[str, Bundle] = {}
    for locale, bundle in raw.items():
        if not isinstance(bundle, Mapping):
            raise CatalogError(f"Bundle for locale '{locale}' must be a mapping")
        bundles[str(locale)] = MappingProxyType(
            {str(key): str(value) for key, value in bundle.items() if value is not None}
        )
    return MappingProxyType(bundles)


def bundle_for(catalog: Catalog, locale: str) -> Bundle:
    """Return the bundle for ``locale`` or an empty mapping when absent."""

    return catalog.get(locale) or _EMPTY_BUNDLE


@cache
def available_locales(package: str = DEFAULT_TRANSLATIONS_PACKAGE) -> tuple[str, ...]:
    """Return the locales with published translation payloads in ``package``."""

    root = resources.files(package)
    return tuple(
        sorted(entry.name[: -len(".json")] for entry in root.iterdir() if entry.name.endswith(".json"))
    )


def _read_bundle_payload(package: str, locale: str) -> dict[str, Any]:
    """Load the raw flat bundle for ``locale`` from ``package``."""

    resource = resources.files(package).joinpath(f"{locale}.json")
    with resource.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise CatalogError(f"Translation payload for '{locale}' must be a JSON object")
    return payload


@cache
def load_catalog(package: str = DEFAULT_TRANSLATIONS_PACKAGE) -> Catalog:
    """Read every packaged bundle once and return the immutable catalogue."""

    return build_catalog(
        {locale: _read_bundle_payload(package, locale) for locale in available_locales(package)}
    )


def normalise_locale(
    locale: str | None,
    catalog: Catalog,
    default_locale: str = DEFAULT_LOCALE,
) -> str:
    """Normalise a locale slug to a catalogue key, defaulting when unknown."""

    if not locale or not locale.strip():
        return default_locale

    candidate = locale.strip().replace("_", "-")
    if candidate in catalog:
        return candidate

    primary = candidate.lower().split("-")[0]
    return primary if primary in catalog else default_locale


__all__ = [
    "Bundle",
    "Catalog",
    "CatalogError",
    "DEFAULT_LOCALE",
    "DEFAULT_TRANSLATIONS_PACKAGE",
    "available_locales",
    "build_catalog",
    "bundle_for",
    "load_catalog",
    "normalise_locale",
]
