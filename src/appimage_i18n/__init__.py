"""Translation catalogue and resolution engine for the AppImage installer."""

from .localization import Resolver, Translator, has_key, load_catalog, resolve

__all__ = ["Resolver", "Translator", "has_key", "load_catalog", "resolve"]
