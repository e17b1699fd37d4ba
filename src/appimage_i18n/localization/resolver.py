"""Deterministic translation lookup with default-locale fallback.

Resolution never raises: an unknown locale falls back to the default locale,
an unknown key renders as itself and a placeholder without a matching
argument stays in the output verbatim. Callers that care about those
conditions either inspect :class:`Resolution` or pass a diagnostic hook.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Mapping, Union

from .catalog import DEFAULT_LOCALE, Catalog
from .diagnostics import DiagnosticHook, EventKind, ResolutionEvent, dispatch

ArgValue = Union[str, int, float]
Args = Mapping[str, ArgValue]

PLACEHOLDER_PATTERN = re.compile(r"\{([a-zA-Z0-9_.-]+)\}")


@dataclass(frozen=True)
class Resolution:
    """Outcome of a lookup, including how the text was obtained."""

    text: str
    key: str
    requested_locale: str
    locale: str | None
    fallback: bool = False
    unresolved_placeholders: tuple[str, ...] = ()

    @property
    def missing(self) -> bool:
        return self.locale is None


def placeholders(template: str) -> tuple[str, ...]:
    """Return placeholder names in ``template`` in order of first appearance."""

    return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def format_template(template: str, args: Args | None = None) -> tuple[str, tuple[str, ...]]:
    """Substitute ``{name}`` tokens from ``args``.

    Returns the text and the names that had no argument; those tokens are
    left untouched. Substituted values are not scanned again.
    """

    values = args or {}
    missing: list[str] = []

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        if name not in missing:
            missing.append(name)
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, template), tuple(missing)


def has_key(catalog: Catalog, locale: str, key: str) -> bool:
    """Return whether ``catalog[locale]`` defines ``key``, without fallback."""

    bundle = catalog.get(locale)
    return bundle is not None and key in bundle


def _select_template(
    catalog: Catalog, locale: str, key: str, default_locale: str
) -> tuple[str, str] | None:
    if has_key(catalog, locale, key):
        return locale, catalog[locale][key]
    if default_locale != locale and has_key(catalog, default_locale, key):
        return default_locale, catalog[default_locale][key]
    return None


def resolve_detailed(
    catalog: Catalog,
    locale: str,
    key: str,
    args: Args | None = None,
    *,
    default_locale: str = DEFAULT_LOCALE,
    on_event: DiagnosticHook | None = None,
) -> Resolution:
    """Resolve ``key`` for ``locale`` and report how the text was produced."""

    selected = _select_template(catalog, locale, key, default_locale)
    if selected is None:
        dispatch(on_event, ResolutionEvent(EventKind.MISSING_KEY, key, locale))
        return Resolution(text=key, key=key, requested_locale=locale, locale=None)

    used_locale, template = selected
    fallback = used_locale != locale
    if fallback:
        dispatch(on_event, ResolutionEvent(EventKind.FALLBACK, key, locale, used_locale))

    text, unresolved = format_template(template, args)
    for name in unresolved:
        dispatch(
            on_event,
            ResolutionEvent(EventKind.MISSING_ARGUMENT, key, locale, used_locale, name),
        )

    return Resolution(
        text=text,
        key=key,
        requested_locale=locale,
        locale=used_locale,
        fallback=fallback,
        unresolved_placeholders=unresolved,
    )


def resolve(
    catalog: Catalog,
    locale: str,
    key: str,
    args: Args | None = None,
    *,
    default_locale: str = DEFAULT_LOCALE,
    on_event: DiagnosticHook | None = None,
) -> str:
    """Return the display string for ``key`` in ``locale``."""

    return resolve_detailed(
        catalog, locale, key, args, default_locale=default_locale, on_event=on_event
    ).text


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings in one locale."""

    locale: str
    resolver: Resolver

    def __call__(self, key: str, **args: ArgValue) -> str:
        return self.resolver.resolve(self.locale, key, args)


@dataclass(frozen=True)
class Resolver:
    """A catalogue bound to its default locale and diagnostic hook.

    Instances are immutable; switching catalogues means building a new
    resolver with :meth:`with_catalog` and swapping the reference.
    """

    catalog: Catalog
    default_locale: str = DEFAULT_LOCALE
    on_event: DiagnosticHook | None = None

    def resolve(self, locale: str, key: str, args: Args | None = None) -> str:
        return self.resolve_detailed(locale, key, args).text

    def resolve_detailed(self, locale: str, key: str, args: Args | None = None) -> Resolution:
        return resolve_detailed(
            self.catalog,
            locale,
            key,
            args,
            default_locale=self.default_locale,
            on_event=self.on_event,
        )

    def has_key(self, locale: str, key: str) -> bool:
        return has_key(self.catalog, locale, key)

    def with_catalog(self, catalog: Catalog) -> Resolver:
        return replace(self, catalog=catalog)

    def translator(self, locale: str) -> Translator:
        return Translator(locale=locale, resolver=self)

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(sorted(self.catalog))


__all__ = [
    "Args",
    "PLACEHOLDER_PATTERN",
    "Resolution",
    "Resolver",
    "Translator",
    "format_template",
    "has_key",
    "placeholders",
    "resolve",
    "resolve_detailed",
]
