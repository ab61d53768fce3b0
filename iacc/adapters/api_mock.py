from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Generic, List, Optional, TypeVar

from iacc.domain.models import Card, Friend, Transfer
from iacc.domain.ports import CardsCompletion, FriendsCompletion, TransfersCompletion
from iacc.domain.result import Failure, Result, Success

from .api_errors import ApiTimeoutError

T = TypeVar("T")


@dataclass
class _ScriptedSource(Generic[T]):
    """Offline source returning fixed records.

    The first ``fail_times`` calls fail with ``ApiTimeoutError``. With
    ``delay_s > 0`` the completion fires later on a timer thread, which
    mirrors a real network client completing off the UI thread.
    """

    records: List[T] = field(default_factory=list)
    fail_times: int = 0
    delay_s: float = 0.0
    calls: int = field(default=0, init=False)

    def _complete(self, completion: Callable[[Result[List[T]]], None]) -> None:
        self.calls += 1
        if self.calls <= self.fail_times:
            result: Result[List[T]] = Failure(
                ApiTimeoutError(f"Simulated failure #{self.calls}", context="mock")
            )
        else:
            result = Success(list(self.records))
        if self.delay_s <= 0:
            completion(result)
            return
        timer = threading.Timer(self.delay_s, completion, args=(result,))
        timer.daemon = True
        timer.start()


@dataclass
class FriendsAPIMock(_ScriptedSource[Friend]):
    def load_friends(self, completion: FriendsCompletion) -> None:
        self._complete(completion)


@dataclass
class CardAPIMock(_ScriptedSource[Card]):
    def load_cards(self, completion: CardsCompletion) -> None:
        self._complete(completion)


@dataclass
class TransfersAPIMock(_ScriptedSource[Transfer]):
    def load_transfers(self, completion: TransfersCompletion) -> None:
        self._complete(completion)


def demo_friends() -> List[Friend]:
    return [
        Friend(id="f-1", name="Ann", phone="+44 20 7946 0001"),
        Friend(id="f-2", name="Bob", phone="+44 20 7946 0002"),
        Friend(id="f-3", name="Chen", phone="+44 20 7946 0003"),
    ]


def demo_cards() -> List[Card]:
    return [
        Card(id="c-1", number="**** **** **** 4242", holder="Ann Example"),
        Card(id="c-2", number="**** **** **** 1881", holder="Ann Example"),
    ]


def demo_transfers(now: Optional[datetime] = None) -> List[Transfer]:
    base = now or datetime(2024, 3, 4, 9, 5)
    rows = [
        ("t-1", "Rent", "850.00", "GBP", "Ann", "Landlord Ltd", True, 0),
        ("t-2", "Dinner split", "23.50", "GBP", "Bob", "Ann", False, 1),
        ("t-3", "Concert tickets", "120.00", "EUR", "Ann", "Chen", True, 3),
        ("t-4", "Birthday gift", "40.00", "USD", "Chen", "Ann", False, 7),
    ]
    return [
        Transfer(
            id=tid,
            description=desc,
            amount=Decimal(amount),
            currency_code=code,
            sender=sender,
            recipient=recipient,
            is_sender=is_sender,
            date=base - timedelta(days=days_ago),
        )
        for tid, desc, amount, code, sender, recipient, is_sender, days_ago in rows
    ]


__all__ = [
    "CardAPIMock",
    "FriendsAPIMock",
    "TransfersAPIMock",
    "demo_cards",
    "demo_friends",
    "demo_transfers",
]
