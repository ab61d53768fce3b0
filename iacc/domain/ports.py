from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Protocol, Sequence

from .models import Card, Friend, Transfer
from .result import Result

if TYPE_CHECKING:  # pragma: no cover
    from iacc.viewmodels.item_vm import ItemViewModel


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class CacheMissError(LookupError):
    """Raised (and delivered as a failure) when the cache holds nothing yet."""


# ---- Completion callback aliases ----
FriendsCompletion = Callable[[Result[List[Friend]]], None]
CardsCompletion = Callable[[Result[List[Card]]], None]
TransfersCompletion = Callable[[Result[List[Transfer]]], None]
ItemsCompletion = Callable[[Result[List["ItemViewModel"]]], None]


# ---- Ports (Hexagonal boundaries) ----
class FriendsAPI(Protocol):
    """Remote friends source. Completion may fire on any thread."""

    def load_friends(self, completion: FriendsCompletion) -> None: ...


class CardAPI(Protocol):
    """Remote cards source. Completion may fire on any thread."""

    def load_cards(self, completion: CardsCompletion) -> None: ...


class TransfersAPI(Protocol):
    """Remote transfers source shared by the sent and received lists."""

    def load_transfers(self, completion: TransfersCompletion) -> None: ...


class FriendsCache(Protocol):
    """On-device friends persistence; ``save`` is fire-and-forget."""

    def save(self, friends: Sequence[Friend]) -> None: ...
    def load_friends(self, completion: FriendsCompletion) -> None: ...


class CompletionContext(Protocol):
    """Designated context that final item results are delivered on."""

    def dispatch(self, callback: Callable[[], None]) -> None: ...


class ItemService(Protocol):
    """Uniform asynchronous list source consumed by ``ListVM``.

    ``load_items`` delivers exactly one result per call.
    """

    def load_items(self, completion: ItemsCompletion) -> None: ...


__all__ = [
    "CacheMissError",
    "CardAPI",
    "CardsCompletion",
    "CompletionContext",
    "FriendsAPI",
    "FriendsCache",
    "FriendsCompletion",
    "ItemService",
    "ItemsCompletion",
    "TransfersAPI",
    "TransfersCompletion",
    "UseCaseError",
]
