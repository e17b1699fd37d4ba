"""Tests for the packaged catalogue and its helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from appimage_i18n.localization import (
    CatalogError,
    available_locales,
    build_catalog,
    bundle_for,
    has_key,
    load_catalog,
    normalise_locale,
    resolve,
)

TRANSLATIONS_ROOT = Path(__file__).resolve().parents[2] / "src" / "appimage_i18n" / "translations"


def _read_value(locale: str, key: str) -> str:
    payload = json.loads(TRANSLATIONS_ROOT.joinpath(f"{locale}.json").read_text(encoding="utf-8"))
    return str(payload[key])


def test_available_locales_lists_packaged_bundles() -> None:
    assert available_locales() == ("en", "it")


def test_load_catalog_reads_shared_bundles(packaged_catalog) -> None:
    assert packaged_catalog["it"]["header.settings"] == _read_value("it", "header.settings")
    assert packaged_catalog["en"]["applist.title"] == _read_value("en", "applist.title")


def test_load_catalog_is_loaded_once() -> None:
    assert load_catalog() is load_catalog()


def test_packaged_locales_share_the_default_key_set(packaged_catalog) -> None:
    assert set(packaged_catalog["it"]) == set(packaged_catalog["en"])


def test_packaged_catalog_scenarios(packaged_catalog) -> None:
    assert resolve(packaged_catalog, "it", "yes_label") == "Si"
    assert resolve(packaged_catalog, "fr", "yes_label") == "Yes"
    assert resolve(packaged_catalog, "it", "nonexistent.key") == "nonexistent.key"
    assert has_key(packaged_catalog, "it", "settings.save_button")
    assert not has_key(packaged_catalog, "fr", "settings.save_button")


def test_build_catalog_copies_input() -> None:
    raw = {"en": {"yes_label": "Yes"}}
    catalog = build_catalog(raw)

    raw["en"]["yes_label"] = "Changed"
    raw["it"] = {"yes_label": "Si"}

    assert catalog["en"]["yes_label"] == "Yes"
    assert "it" not in catalog


def test_build_catalog_coerces_values_to_strings() -> None:
    catalog = build_catalog({"en": {"count": 3}})
    assert dict(catalog["en"]) == {"count": "3"}


def test_build_catalog_drops_empty_templates() -> None:
    catalog = build_catalog({"en": {"k": "Key"}, "it": {"k": None, "other": None}})

    assert not has_key(catalog, "it", "k")
    assert resolve(catalog, "it", "k") == "Key"
    assert resolve(catalog, "it", "other") == "other"


@pytest.mark.parametrize("raw", [["en"], {"en": ["Yes"]}, {"en": "Yes"}])
def test_build_catalog_rejects_malformed_payloads(raw) -> None:
    with pytest.raises(CatalogError):
        build_catalog(raw)


def test_bundle_for_unknown_locale_is_empty(catalog) -> None:
    assert dict(bundle_for(catalog, "fr")) == {}
    assert bundle_for(catalog, "it")["yes_label"] == "Si"


@pytest.mark.parametrize(
    ("hint", "expected"),
    [
        ("it", "it"),
        ("IT", "it"),
        ("it-IT", "it"),
        ("it_IT", "it"),
        ("en-GB", "en"),
        ("fr", "en"),
        ("", "en"),
        (None, "en"),
        ("   ", "en"),
    ],
)
def test_normalise_locale(catalog, hint, expected: str) -> None:
    assert normalise_locale(hint, catalog) == expected


def test_normalise_locale_uses_configured_default(catalog) -> None:
    assert normalise_locale("fr", catalog, default_locale="it") == "it"
