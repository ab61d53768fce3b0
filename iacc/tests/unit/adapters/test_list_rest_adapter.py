from __future__ import annotations

import threading
from concurrent.futures import Future
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from requests import exceptions as req_exc

from iacc.adapters.api_errors import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from iacc.adapters.list_rest import ListRestAdapter


class _InlineExecutor:
    """Executor double running submitted work immediately."""

    def submit(self, fn, *args, **kwargs) -> Future:
        future: Future = Future()
        future.set_result(fn(*args, **kwargs))
        return future

    def shutdown(self, wait: bool = True) -> None:
        return None


class _ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = str(payload)

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _SessionStub:
    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> _ResponseStub:
        self.calls.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def _adapter(responses, **kwargs) -> "tuple[ListRestAdapter, _SessionStub]":
    session = _SessionStub(responses)
    adapter = ListRestAdapter(
        "http://api.local/",
        executor=_InlineExecutor(),
        session=session,  # type: ignore[arg-type]
        **kwargs,
    )
    return adapter, session


def _load(method) -> Any:
    results = []
    method(results.append)
    assert len(results) == 1
    return results[0]


def test_load_friends_hits_endpoint_with_api_key() -> None:
    adapter, session = _adapter(
        [_ResponseStub([{"id": 1, "name": "Ann", "phone": "555"}, "junk"])],
        api_key="secret",
        request_timeout_s=3,
    )

    result = _load(adapter.load_friends)

    assert [f.name for f in result.value] == ["Ann"]
    assert result.value[0].id == "1"
    assert session.calls[0]["url"] == "http://api.local/friends"
    assert session.calls[0]["headers"]["X-API-Key"] == "secret"
    assert session.calls[0]["timeout"] == 3


def test_load_transfers_accepts_wrapped_items() -> None:
    payload = {
        "items": [
            {
                "id": "t1",
                "description": "Rent",
                "amount": "850.5",
                "currency_code": "GBP",
                "sender": "Ann",
                "recipient": "Landlord",
                "is_sender": True,
                "date": "2024-03-04T09:05:00Z",
            }
        ]
    }
    adapter, _ = _adapter([_ResponseStub(payload)])

    transfer = _load(adapter.load_transfers).value[0]

    assert transfer.amount == Decimal("850.5")
    assert transfer.is_sender is True
    assert transfer.date.year == 2024


def test_client_error_is_delivered_as_failure() -> None:
    adapter, _ = _adapter([_ResponseStub({"detail": "nope", "hint": "log in"}, status_code=401)])

    result = _load(adapter.load_cards)

    assert isinstance(result.error, ApiClientError)
    assert result.error.status == 401
    assert result.error.hint == "log in"


def test_server_error_is_delivered_as_failure() -> None:
    adapter, _ = _adapter([_ResponseStub("boom", status_code=503)])

    result = _load(adapter.load_cards)

    assert isinstance(result.error, ApiServerError)
    assert "HTTP 503" in str(result.error)


def test_timeouts_are_retried_at_transport_level() -> None:
    adapter, session = _adapter(
        [req_exc.Timeout(), _ResponseStub([{"id": "c", "number": "42", "holder": "Ann"}])],
        retries=1,
    )

    result = _load(adapter.load_cards)

    assert result.is_success
    assert len(session.calls) == 2


def test_exhausted_timeouts_become_timeout_error() -> None:
    adapter, _ = _adapter([req_exc.ConnectionError()])

    result = _load(adapter.load_friends)

    assert isinstance(result.error, ApiTimeoutError)


def test_non_list_payload_is_a_failure() -> None:
    adapter, _ = _adapter([_ResponseStub({"unexpected": True})])

    result = _load(adapter.load_friends)

    assert isinstance(result.error, ApiError)


def test_malformed_record_is_a_failure() -> None:
    adapter, _ = _adapter([_ResponseStub([{"name": "no id"}])])

    result = _load(adapter.load_friends)

    assert isinstance(result.error, ApiError)
    assert "malformed" in str(result.error)


def test_unparseable_amount_is_a_failure() -> None:
    adapter, _ = _adapter(
        [_ResponseStub([{"id": "t-1", "amount": None, "date": "2024-03-04T09:05:00"}])]
    )

    result = _load(adapter.load_transfers)

    assert isinstance(result.error, ApiError)
    assert "malformed" in str(result.error)


def test_pooled_load_always_completes() -> None:
    done = threading.Event()
    results = []

    def _complete(result) -> None:
        results.append(result)
        done.set()

    adapter = ListRestAdapter(
        "http://api.local",
        session=_SessionStub(  # type: ignore[arg-type]
            [_ResponseStub([{"id": "t-1", "amount": "abc", "date": "2024-03-04T09:05:00"}])]
        ),
    )
    try:
        adapter.load_transfers(_complete)
        assert done.wait(timeout=2.0)
    finally:
        adapter.close()

    assert len(results) == 1
    assert isinstance(results[0].error, ApiError)


def test_unexpected_parser_error_still_completes() -> None:
    adapter, _ = _adapter([_ResponseStub([{"id": "x"}])])

    def _explode(_data):
        raise RuntimeError("parser bug")

    results = []
    adapter._fetch_and_complete("/friends", _explode, results.append)

    assert len(results) == 1
    assert isinstance(results[0].error, ApiError)
    assert "parser bug" in str(results[0].error)


def test_wrapped_error_body_fills_code_and_hint() -> None:
    body = {"error": {"code": "rate_limited", "message": "Slow down", "hint": "retry in 30s"}}
    adapter, _ = _adapter([_ResponseStub(body, status_code=429)])

    result = _load(adapter.load_friends)

    assert isinstance(result.error, ApiClientError)
    assert result.error.code == "rate_limited"
    assert result.error.hint == "retry in 30s"
    assert str(result.error) == "list[friends]: Slow down (HTTP 429)"
