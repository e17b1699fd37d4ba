"""Application factory serving the translation catalogue over HTTP."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from appimage_i18n.config import build_resolver
from appimage_i18n.localization import Resolver
from appimage_i18n.version import get_project_version

from .http import problem_from_exception
from .routes import register_routes
from .routes.translations import EXTENSION_KEY, current_resolver


def create_app(resolver: Resolver | None = None) -> Flask:
    """Create the Flask application bound to ``resolver``.

    When no resolver is given one is built from the configured settings and
    the packaged catalogue.
    """

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[EXTENSION_KEY] = resolver or build_resolver()

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        active = current_resolver()
        payload = {
            "status": "ok",
            "version": get_project_version(),
            "default_locale": active.default_locale,
            "locales": list(active.locales),
        }
        return jsonify(payload)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        """Return consistent JSON bodies for routing and request errors."""

        return problem_from_exception(error).to_response()

    return app


__all__ = ["create_app"]
