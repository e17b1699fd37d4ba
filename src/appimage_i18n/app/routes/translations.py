"""Expose translation bundles and key resolution to front-end consumers."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from appimage_i18n.localization import Resolver, bundle_for, normalise_locale

EXTENSION_KEY = "appimage_i18n"

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


def current_resolver() -> Resolver:
    """Return the resolver registered on the active application."""

    return current_app.extensions[EXTENSION_KEY]


def _bundle_payload(resolver: Resolver, locale_hint: str | None) -> dict[str, Any]:
    locale = normalise_locale(locale_hint, resolver.catalog, resolver.default_locale)
    return {
        "locale": locale,
        "default_locale": resolver.default_locale,
        "available_locales": list(resolver.locales),
        "messages": dict(bundle_for(resolver.catalog, locale)),
        "fallback": {
            "locale": resolver.default_locale,
            "messages": dict(bundle_for(resolver.catalog, resolver.default_locale)),
        },
    }


@blueprint.get("/")
def get_default_translations():
    """Return the bundle for the ``locale`` query hint or the default locale."""

    payload = _bundle_payload(current_resolver(), request.args.get("locale"))
    return jsonify(payload), 200


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return the bundle for a specific locale slug."""

    payload = _bundle_payload(current_resolver(), locale)
    return jsonify(payload), 200


@blueprint.get("/<locale>/<path:key>")
def resolve_translation(locale: str, key: str):
    """Resolve one key; query parameters supply interpolation values."""

    resolution = current_resolver().resolve_detailed(locale, key, request.args.to_dict())
    return (
        jsonify(
            {
                "locale": resolution.requested_locale,
                "resolved_locale": resolution.locale,
                "key": resolution.key,
                "text": resolution.text,
                "fallback": resolution.fallback,
                "missing": resolution.missing,
                "unresolved_placeholders": list(resolution.unresolved_placeholders),
            }
        ),
        200,
    )
