from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from iacc.domain.models import Friend
from iacc.domain.result import Failure, Result, Success
from iacc.viewmodels.item_vm import ItemViewModel


class RecordingContext:
    """Completion context that runs callbacks inline and counts them."""

    def __init__(self) -> None:
        self.dispatched = 0

    def dispatch(self, callback: Callable[[], None]) -> None:
        self.dispatched += 1
        callback()


class DeferredContext:
    """Completion context that holds callbacks until ``flush``."""

    def __init__(self) -> None:
        self.pending: List[Callable[[], None]] = []

    def dispatch(self, callback: Callable[[], None]) -> None:
        self.pending.append(callback)

    def flush(self) -> None:
        while self.pending:
            self.pending.pop(0)()


class ScriptedSource:
    """Source replaying one result per call (last one repeats)."""

    def __init__(self, results: Sequence[Result]) -> None:
        self._results = list(results)
        self.calls = 0

    def _next(self) -> Result:
        self.calls += 1
        index = min(self.calls, len(self._results)) - 1
        return self._results[index]

    def load_friends(self, completion) -> None:
        completion(self._next())

    def load_cards(self, completion) -> None:
        completion(self._next())

    def load_transfers(self, completion) -> None:
        completion(self._next())


class ItemServiceStub:
    """ItemService replaying scripted results; records every call."""

    def __init__(self, results: Sequence[Result], *, deferred: bool = False) -> None:
        self._results = list(results)
        self.calls = 0
        self.deferred = deferred
        self.pending: List[Callable[[], None]] = []

    def load_items(self, completion) -> None:
        self.calls += 1
        index = min(self.calls, len(self._results)) - 1
        result = self._results[index]
        if self.deferred:
            self.pending.append(lambda: completion(result))
        else:
            completion(result)

    def complete_next(self) -> None:
        self.pending.pop(0)()


class CacheSpy:
    def __init__(self, stored: Optional[List[Friend]] = None) -> None:
        self.saved: List[List[Friend]] = []
        self.stored = stored

    def save(self, friends: Sequence[Friend]) -> None:
        self.saved.append(list(friends))

    def load_friends(self, completion) -> None:
        if self.stored is None:
            completion(Failure(LookupError("empty")))
        else:
            completion(Success(list(self.stored)))


def items(*titles: str) -> List[ItemViewModel]:
    return [ItemViewModel(title=t, subtitle="", select=lambda: None) for t in titles]


def collect(service) -> List[Result]:
    results: List[Result] = []
    service.load_items(results.append)
    return results


__all__ = [
    "CacheSpy",
    "DeferredContext",
    "ItemServiceStub",
    "RecordingContext",
    "ScriptedSource",
    "collect",
    "items",
]
