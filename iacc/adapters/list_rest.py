"""REST adapter for the friends, cards, and transfers endpoints.

Requests run on a worker pool and complete on the worker thread; the
item-service adaptors are responsible for hopping back to the UI thread.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Callable, List, Optional, TypeVar

import requests

from iacc.domain.models import Card, Friend, Transfer
from iacc.domain.ports import CardsCompletion, FriendsCompletion, TransfersCompletion
from iacc.domain.result import Failure, Result, Success

from .api_errors import ApiError
from .http_client import HttpConfig, RetryingSession, ensure_ok, json_any

T = TypeVar("T")


class ListRestAdapter:
    """Implements ``FriendsAPI``, ``CardAPI`` and ``TransfersAPI`` over HTTP.

    Endpoints (JSON lists):
        ``GET /friends``, ``GET /cards``, ``GET /transfers``. A payload may
        also be an object wrapping the list under ``items``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 0,
        executor: Optional[Executor] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("ListRestAdapter requires a base URL")
        self._log = logging.getLogger(__name__)
        self.base_url = base_url.strip().rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.http = RetryingSession(api_key or None, self.cfg, session=session)
        self._executor = executor or ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="iacc-api"
        )

    # ---------- ports ----------

    def load_friends(self, completion: FriendsCompletion) -> None:
        self._submit("/friends", Friend.from_dict, completion)

    def load_cards(self, completion: CardsCompletion) -> None:
        self._submit("/cards", Card.from_dict, completion)

    def load_transfers(self, completion: TransfersCompletion) -> None:
        self._submit("/transfers", Transfer.from_dict, completion)

    def close(self) -> None:
        self._executor.shutdown(wait=False)

    # ---------- helpers ----------

    def _submit(
        self,
        path: str,
        parse: Callable[[Any], T],
        completion: Callable[[Result[List[T]]], None],
    ) -> None:
        self._executor.submit(self._fetch_and_complete, path, parse, completion)

    def _fetch_and_complete(
        self,
        path: str,
        parse: Callable[[Any], T],
        completion: Callable[[Result[List[T]]], None],
    ) -> None:
        try:
            result = self.fetch_list(path, parse)
        except Exception as exc:
            self._log.exception("%s: unexpected failure", path)
            result = Failure(ApiError(f"{path}: unexpected failure: {exc}", context=path))
        completion(result)

    def fetch_list(self, path: str, parse: Callable[[Any], T]) -> Result[List[T]]:
        """Run one blocking GET and convert the outcome into a ``Result``."""
        url = f"{self.base_url}{path}"
        ctx = f"list[{path.strip('/')}]"
        try:
            resp = self.http.get(url)
            ensure_ok(resp, ctx)
            data = json_any(resp, ctx)
            if isinstance(data, dict) and isinstance(data.get("items"), list):
                data = data["items"]
            if not isinstance(data, list):
                raise ApiError(f"{ctx}: expected list response", context=ctx)
            records = [parse(entry) for entry in data if isinstance(entry, dict)]
        except ApiError as exc:
            self._log.debug("%s failed: %s", ctx, exc)
            return Failure(exc)
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            self._log.debug("%s returned malformed records: %s", ctx, exc)
            return Failure(ApiError(f"{ctx}: malformed record: {exc}", context=ctx))
        return Success(records)


__all__ = ["ListRestAdapter"]
