"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from appimage_i18n.app import create_app  # noqa: E402
from appimage_i18n.localization import Catalog, Resolver, build_catalog, load_catalog  # noqa: E402


@pytest.fixture()
def catalog() -> Catalog:
    """Return a small two-locale catalogue with deliberately divergent keys."""

    return build_catalog(
        {
            "en": {
                "yes_label": "Yes",
                "greeting": "Hello, {name}!",
                "settings.save_button": "Save",
                "install_file.progress": "Installing {app} ({done}/{total})",
                "applist.title": "App list",
            },
            "it": {
                "yes_label": "Si",
                "greeting": "Ciao, {name}!",
                "settings.save_button": "Salva",
            },
        }
    )


@pytest.fixture()
def packaged_catalog() -> Catalog:
    """Return the catalogue shipped with the package."""

    return load_catalog()


@pytest.fixture()
def app() -> Flask:
    """Return an application bound to the packaged catalogue."""

    application = create_app(Resolver(catalog=load_catalog()))
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
