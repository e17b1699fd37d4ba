"""Packaged translation bundles, one flat ``<locale>.json`` file per locale."""
