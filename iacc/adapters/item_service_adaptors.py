"""Adaptors that expose the friends, cards, and transfers sources as ``ItemService``.

Each adaptor wraps one source plus a per-record ``select`` hook, projects the
records into ``ItemViewModel`` rows, and hands the result to its completion
context so the caller always receives it on the designated thread.

Call context:
    Built by ``iacc.app.composition.ListComposer`` and wrapped with the
    decorators from ``iacc.usecases.item_service``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from iacc.domain.models import Card, Friend, Transfer
from iacc.domain.ports import (
    CardAPI,
    CompletionContext,
    FriendsAPI,
    FriendsCache,
    ItemsCompletion,
    TransfersAPI,
)
from iacc.domain.result import Result
from iacc.viewmodels.item_vm import ItemViewModel, card_item, friend_item, transfer_item

_log = logging.getLogger(__name__)


def _deliver(
    context: CompletionContext,
    completion: ItemsCompletion,
    result: Result[List[ItemViewModel]],
) -> None:
    context.dispatch(lambda: completion(result))


def _log_outcome(source: str, result: Result) -> None:
    if result.is_success:
        _log.debug("%s: loaded %d records", source, len(result.value))
    else:
        _log.debug("%s: load failed: %s", source, result.error)


@dataclass(frozen=True)
class FriendsAPIItemServiceAdaptor:
    """Friends API source with write-through into ``cache`` on success."""

    api: FriendsAPI
    cache: FriendsCache
    select: Callable[[Friend], None]
    context: CompletionContext

    def load_items(self, completion: ItemsCompletion) -> None:
        def handle(result: Result[List[Friend]]) -> None:
            _log_outcome("friends api", result)
            if result.is_success:
                friends = list(result.value)
                self.cache.save(friends)
                mapped: Result[List[ItemViewModel]] = result.map(
                    lambda _: [friend_item(f, _bind(self.select, f)) for f in friends]
                )
            else:
                mapped = result
            _deliver(self.context, completion, mapped)

        self.api.load_friends(handle)


@dataclass(frozen=True)
class FriendsCacheItemServiceAdaptor:
    cache: FriendsCache
    select: Callable[[Friend], None]
    context: CompletionContext

    def load_items(self, completion: ItemsCompletion) -> None:
        def handle(result: Result[List[Friend]]) -> None:
            _log_outcome("friends cache", result)
            mapped = result.map(
                lambda friends: [friend_item(f, _bind(self.select, f)) for f in friends]
            )
            _deliver(self.context, completion, mapped)

        self.cache.load_friends(handle)


@dataclass(frozen=True)
class CardAPIItemServiceAdaptor:
    api: CardAPI
    select: Callable[[Card], None]
    context: CompletionContext

    def load_items(self, completion: ItemsCompletion) -> None:
        def handle(result: Result[List[Card]]) -> None:
            _log_outcome("cards api", result)
            mapped = result.map(
                lambda cards: [card_item(c, _bind(self.select, c)) for c in cards]
            )
            _deliver(self.context, completion, mapped)

        self.api.load_cards(handle)


@dataclass(frozen=True)
class _TransfersAPIItemServiceAdaptor:
    """Shared body for the sent/received partitions of the transfers list."""

    api: TransfersAPI
    select: Callable[[Transfer], None]
    context: CompletionContext

    # Overridden by the concrete partitions.
    keep_sent = True
    long_date_style = True

    def load_items(self, completion: ItemsCompletion) -> None:
        def handle(result: Result[List[Transfer]]) -> None:
            _log_outcome(self._source_name(), result)
            mapped = result.map(self._project)
            _deliver(self.context, completion, mapped)

        self.api.load_transfers(handle)

    def _project(self, transfers: List[Transfer]) -> List[ItemViewModel]:
        return [
            transfer_item(t, _bind(self.select, t), long_date_style=self.long_date_style)
            for t in transfers
            if bool(t.is_sender) is self.keep_sent
        ]

    def _source_name(self) -> str:
        return "sent transfers api" if self.keep_sent else "received transfers api"


@dataclass(frozen=True)
class SentTransfersAPIItemServiceAdaptor(_TransfersAPIItemServiceAdaptor):
    keep_sent = True
    long_date_style = True


@dataclass(frozen=True)
class ReceivedTransfersAPIItemServiceAdaptor(_TransfersAPIItemServiceAdaptor):
    keep_sent = False
    long_date_style = False


def _bind(select: Callable[[object], None], record: object) -> Callable[[], None]:
    return lambda: select(record)


__all__ = [
    "CardAPIItemServiceAdaptor",
    "FriendsAPIItemServiceAdaptor",
    "FriendsCacheItemServiceAdaptor",
    "ReceivedTransfersAPIItemServiceAdaptor",
    "SentTransfersAPIItemServiceAdaptor",
]
