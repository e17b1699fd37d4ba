"""JSON error payloads shared by the translation endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from flask import jsonify
from werkzeug.exceptions import HTTPException


@dataclass(frozen=True)
class ProblemResponse:
    """RFC 7807-flavoured error body with an HTTP status."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "status": self.status}
        if self.message:
            payload["message"] = self.message
        payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Build a :class:`ProblemResponse` from keyword details."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra)


def problem_from_exception(exc: HTTPException) -> ProblemResponse:
    """Translate a werkzeug HTTP exception into a problem payload."""

    slug = (exc.name or "error").lower().replace(" ", "_")
    return problem_response(slug, status=exc.code or 500, message=exc.description)


__all__ = ["ProblemResponse", "problem_from_exception", "problem_response"]
