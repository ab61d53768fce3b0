"""Fallback and retry decorators over ``ItemService``.

Decorators never hop threads themselves: they forward whatever context the
inner adaptor already delivered on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from iacc.domain.ports import ItemService, ItemsCompletion
from iacc.domain.result import Result

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemServiceWithFallback:
    """Try ``primary``; on failure deliver whatever ``fallback`` delivers."""

    primary: ItemService
    fallback: ItemService

    def load_items(self, completion: ItemsCompletion) -> None:
        def handle(result: Result[List]) -> None:
            if result.is_success:
                completion(result)
                return
            _log.debug("Primary item source failed, falling back: %s", result.error)
            self.fallback.load_items(completion)

        self.primary.load_items(handle)


def with_fallback(primary: ItemService, secondary: ItemService) -> ItemService:
    return ItemServiceWithFallback(primary=primary, fallback=secondary)


def with_retry(service: ItemService, count: int) -> ItemService:
    """Wrap ``service`` so it is attempted up to ``count + 1`` times.

    Attempts run back to back with no delay and stop at the first success.
    When every attempt fails, the last attempt's error is delivered.
    ``count == 0`` returns ``service`` itself.
    """
    if count < 0:
        raise ValueError("retry count must be >= 0")
    wrapped = service
    for _ in range(count):
        wrapped = with_fallback(wrapped, service)
    return wrapped


__all__ = ["ItemServiceWithFallback", "with_fallback", "with_retry"]
