"""Typed failures raised by the list REST adapter.

Error bodies returned by ``/friends``, ``/cards`` and ``/transfers`` are
either flat::

    {"code": "rate_limited", "message": "Slow down", "hint": "retry in 30s"}

or wrap the same fields under ``"error"``. Anything else (plain text, HTML
from a proxy) is kept as a short message only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_TEXT_LIMIT = 200


class ApiError(RuntimeError):
    """Base class for REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.hint = hint
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the list API."""


class ApiServerError(ApiError):
    """HTTP 5xx from the list API."""


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


@dataclass(frozen=True)
class ErrorBody:
    message: Optional[str] = None
    code: Optional[str] = None
    hint: Optional[str] = None


def read_error_body(resp: Any) -> ErrorBody:
    """Decode a non-2xx response body without raising."""
    try:
        data = resp.json()
    except ValueError:
        return ErrorBody(message=_text(getattr(resp, "text", None)))
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        data = data["error"]
    if not isinstance(data, dict):
        return ErrorBody(message=_text(data))
    return ErrorBody(
        message=_text(data.get("message") or data.get("detail")),
        code=_text(data.get("code")),
        hint=_text(data.get("hint")),
    )


def _text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text[:_TEXT_LIMIT] or None


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "ErrorBody",
    "read_error_body",
]
