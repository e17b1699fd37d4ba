"""Observability hooks for translation lookups.

Diagnostics are opt-in and decoupled from control flow: a hook observes
fallback use, unresolved keys and unsubstituted placeholders, but nothing it
does can change the string handed back to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

_LOGGER = logging.getLogger(__name__)


class EventKind(str, Enum):
    """Categories of non-fatal conditions observed during resolution."""

    FALLBACK = "fallback"
    MISSING_KEY = "missing_key"
    MISSING_ARGUMENT = "missing_argument"


@dataclass(frozen=True)
class ResolutionEvent:
    """A single diagnostic emitted while resolving ``key``."""

    kind: EventKind
    key: str
    requested_locale: str
    locale: str | None = None
    placeholder: str | None = None

    def describe(self) -> str:
        """Return a human readable summary suitable for log output."""

        if self.kind is EventKind.FALLBACK:
            return (
                f"'{self.key}' missing for locale '{self.requested_locale}', "
                f"using '{self.locale}'"
            )
        if self.kind is EventKind.MISSING_KEY:
            return f"'{self.key}' unresolved for locale '{self.requested_locale}'"
        return (
            f"'{self.key}' ({self.locale}) left placeholder "
            f"'{{{self.placeholder}}}' unsubstituted"
        )


DiagnosticHook = Callable[[ResolutionEvent], None]


def logging_hook(
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> DiagnosticHook:
    """Return a hook that forwards events to ``logger`` at ``level``."""

    target = logger or _LOGGER

    def _log_event(event: ResolutionEvent) -> None:
        target.log(level, "translation %s: %s", event.kind.value, event.describe())

    return _log_event


@dataclass
class EventRecorder:
    """Hook collecting events in memory, e.g. to audit untranslated strings."""

    events: list[ResolutionEvent] = field(default_factory=list)

    def __call__(self, event: ResolutionEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: EventKind) -> list[ResolutionEvent]:
        return [event for event in self.events if event.kind is kind]

    def clear(self) -> None:
        self.events.clear()


def dispatch(hook: DiagnosticHook | None, event: ResolutionEvent) -> None:
    """Invoke ``hook`` with ``event``, containing any failure it raises."""

    if hook is None:
        return
    try:
        hook(event)
    except Exception:  # noqa: BLE001
        _LOGGER.exception("Translation diagnostic hook failed for %s", event.key)


__all__ = [
    "DiagnosticHook",
    "EventKind",
    "EventRecorder",
    "ResolutionEvent",
    "dispatch",
    "logging_hook",
]
