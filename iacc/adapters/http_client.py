"""Shared HTTP transport utilities for the list REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations can share timeout policy, transport retries, API-key header
construction, and HTTP status to ``ApiError`` mapping.

Dependencies:
    - ``requests`` for network I/O.
    - ``iacc.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``iacc.adapters.list_rest.ListRestAdapter``.
    - Used only inside the adapter layer; item services see domain results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from iacc.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    read_error_body,
)


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for JSON API calls.
        retries: Transport-level retries after the initial request. These
            cover dropped connections only; list-level retries are composed
            with ``with_retry``.
    """
    request_timeout_s: int = 10
    retries: int = 0


class RetryingSession:
    """Requests wrapper with API-key headers and a transport retry loop."""

    def __init__(
        self,
        api_key: Optional[str],
        cfg: HttpConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a retry-enabled session.

        Args:
            api_key: API key value to place in ``X-API-Key`` headers, or ``None``.
            cfg: Shared timeout and retry settings.
            session: Optional pre-built session (tests inject stubs here).
        """
        self.session = session or requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self, accept: str = "application/json") -> Dict[str, str]:
        headers = {"Accept": accept}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a GET request with retries on timeout/connectivity failures.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
            ApiError: For any other ``requests`` failure.
        """
        context = f"GET {url}"
        last_err: Optional[ApiTimeoutError] = None
        for _ in range(self.cfg.retries + 1):
            try:
                return self.session.get(
                    url,
                    params=params,
                    headers=self._headers(),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError):
                last_err = ApiTimeoutError(f"Timeout contacting {url}", context=context)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        assert last_err is not None
        raise last_err


def ensure_ok(resp: requests.Response, ctx: str) -> None:
    """Raise the matching ``ApiError`` subclass for non-2xx responses."""
    if 200 <= resp.status_code < 300:
        return
    status = resp.status_code
    body = read_error_body(resp)
    message = f"{ctx}: {body.message} (HTTP {status})" if body.message else f"{ctx}: HTTP {status}"
    if 400 <= status < 500:
        cls = ApiClientError
    elif 500 <= status < 600:
        cls = ApiServerError
    else:
        cls = ApiError
    raise cls(message, status=status, code=body.code, hint=body.hint, context=ctx)


def json_any(resp: requests.Response, ctx: str) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        snippet = (getattr(resp, "text", "") or "")[:400]
        raise ApiError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc


__all__ = ["HttpConfig", "RetryingSession", "ensure_ok", "json_any"]
