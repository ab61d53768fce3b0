"""Composition root: which item-service chain backs each list.

Policy:
    - Friends (premium): API adaptor writing through to the real cache,
      retried twice, falling back to the cache adaptor.
    - Friends (other accounts): API adaptor with a null cache, retried twice.
    - Sent / received transfers: partitioned adaptors, retried once each.
    - Cards: bare API adaptor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from iacc.adapters.friends_cache_local import NullFriendsCache
from iacc.adapters.item_service_adaptors import (
    CardAPIItemServiceAdaptor,
    FriendsAPIItemServiceAdaptor,
    FriendsCacheItemServiceAdaptor,
    ReceivedTransfersAPIItemServiceAdaptor,
    SentTransfersAPIItemServiceAdaptor,
)
from iacc.domain.models import Card, Friend, Transfer, User
from iacc.domain.ports import (
    CardAPI,
    CompletionContext,
    FriendsAPI,
    FriendsCache,
    ItemService,
    TransfersAPI,
)
from iacc.usecases.item_service import with_fallback, with_retry
from iacc.viewmodels.list_vm import ListVM

FRIENDS_RETRIES = 2
TRANSFERS_RETRIES = 1


def _ignore(_record: object) -> None:
    return None


@dataclass
class SelectionHooks:
    """Per-record selection callbacks owned by the app shell."""

    on_friend: Callable[[Friend], None] = _ignore
    on_card: Callable[[Card], None] = _ignore
    on_transfer: Callable[[Transfer], None] = _ignore


@dataclass
class ListComposer:
    """Build the ``ItemService`` chains and their ``ListVM`` objects."""

    friends_api: FriendsAPI
    cards_api: CardAPI
    transfers_api: TransfersAPI
    friends_cache: FriendsCache
    context: CompletionContext
    user: Optional[User] = None
    hooks: SelectionHooks = field(default_factory=SelectionHooks)

    @property
    def is_premium(self) -> bool:
        return bool(self.user and self.user.is_premium)

    # ---------- services ----------

    def friends_service(self) -> ItemService:
        cache = self.friends_cache if self.is_premium else NullFriendsCache()
        api = with_retry(
            FriendsAPIItemServiceAdaptor(
                api=self.friends_api,
                cache=cache,
                select=self.hooks.on_friend,
                context=self.context,
            ),
            FRIENDS_RETRIES,
        )
        if not self.is_premium:
            return api
        cached = FriendsCacheItemServiceAdaptor(
            cache=self.friends_cache,
            select=self.hooks.on_friend,
            context=self.context,
        )
        return with_fallback(api, cached)

    def sent_transfers_service(self) -> ItemService:
        return with_retry(
            SentTransfersAPIItemServiceAdaptor(
                api=self.transfers_api,
                select=self.hooks.on_transfer,
                context=self.context,
            ),
            TRANSFERS_RETRIES,
        )

    def received_transfers_service(self) -> ItemService:
        return with_retry(
            ReceivedTransfersAPIItemServiceAdaptor(
                api=self.transfers_api,
                select=self.hooks.on_transfer,
                context=self.context,
            ),
            TRANSFERS_RETRIES,
        )

    def cards_service(self) -> ItemService:
        return CardAPIItemServiceAdaptor(
            api=self.cards_api,
            select=self.hooks.on_card,
            context=self.context,
        )

    # ---------- list view models ----------

    def compose_tabs(self) -> Dict[str, ListVM]:
        """Return one ``ListVM`` per screen, keyed by screen title."""
        return {
            "Friends": ListVM(self.friends_service(), title="Friends"),
            "Sent": ListVM(self.sent_transfers_service(), title="Sent"),
            "Received": ListVM(self.received_transfers_service(), title="Received"),
            "Cards": ListVM(self.cards_service(), title="Cards"),
        }


__all__ = ["FRIENDS_RETRIES", "TRANSFERS_RETRIES", "ListComposer", "SelectionHooks"]
