from __future__ import annotations

from iacc.adapters.api_errors import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from iacc.domain.ports import CacheMissError, UseCaseError
from iacc.usecases.error_mapping import map_load_error


def test_timeout_maps_to_connection_hint() -> None:
    err = map_load_error(ApiTimeoutError("timeout", context="GET /friends"))

    assert err.code == "REQUEST_TIMEOUT"
    assert err.message == "Request timed out. Check connection."


def test_auth_failure() -> None:
    err = map_load_error(ApiClientError("ctx", status=403))

    assert err.code == "AUTH_FAILED"


def test_client_error_uses_hint() -> None:
    err = map_load_error(ApiClientError("ctx", status=422, hint="bad filter"))

    assert err.code == "REQUEST_FAILED"
    assert err.message == "Request failed (HTTP 422): bad filter"


def test_not_found_is_prefixed_with_list_name() -> None:
    err = map_load_error(ApiClientError("ctx", status=404), list_name="Cards")

    assert err.message == "Cards: Nothing found."


def test_server_error() -> None:
    assert map_load_error(ApiServerError("ctx", status=500)).code == "SERVER_ERROR"


def test_generic_api_error_keeps_text() -> None:
    err = map_load_error(ApiError("list[friends]: expected list response"))

    assert err.code == "API_ERROR"
    assert err.message == "list[friends]: expected list response"


def test_cache_miss() -> None:
    err = map_load_error(CacheMissError("nothing yet"), list_name="Friends")

    assert err.code == "CACHE_EMPTY"
    assert err.message == "Friends: No saved data available offline."


def test_use_case_error_passes_through() -> None:
    original = UseCaseError("X", "already mapped")

    assert map_load_error(original) is original


def test_unknown_error_falls_back_to_default_code() -> None:
    err = map_load_error(RuntimeError(""), default_code="FRIENDS_FAILED")

    assert err.code == "FRIENDS_FAILED"
    assert err.message == "Unexpected error."
