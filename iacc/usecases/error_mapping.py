"""Translate the final failure of a list load into a UseCaseError."""

from __future__ import annotations

from typing import Optional

from iacc.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
)
from iacc.domain.ports import CacheMissError, UseCaseError


def map_load_error(
    exc: Exception,
    *,
    list_name: Optional[str] = None,
    default_code: str = "LOAD_FAILED",
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Error delivered by the last load attempt.
        list_name: Optional list label used to prefix generic messages.
        default_code: Code used for errors without a specific mapping.

    Returns:
        UseCaseError whose ``message`` is ready to show to the user.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        if status in (401, 403):
            return UseCaseError("AUTH_FAILED", "Sign-in expired or API key invalid.")
        if status == 404:
            return UseCaseError("NOT_FOUND", _prefixed(list_name, "Nothing found."))
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, exc.hint))
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Server error, pull to refresh to try again.")
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))
    if isinstance(exc, CacheMissError):
        return UseCaseError("CACHE_EMPTY", _prefixed(list_name, "No saved data available offline."))

    message = str(exc) or "Unexpected error."
    return UseCaseError(default_code, _prefixed(list_name, message))


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


def _prefixed(list_name: Optional[str], message: str) -> str:
    return f"{list_name}: {message}" if list_name else message


__all__ = ["map_load_error"]
