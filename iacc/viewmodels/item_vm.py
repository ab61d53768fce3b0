"""Presentation rows for the list screens.

Call context:
    Item-service adaptors project domain records through the helpers below
    and hand the resulting ``ItemViewModel`` objects to ``ListVM``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from datetime import datetime
from typing import Callable

from iacc.domain.models import Card, Friend, Transfer


@dataclass(frozen=True)
class ItemViewModel:
    """One display row: title, subtitle, and the action run on selection."""
    title: str
    subtitle: str
    select: Callable[[], None]


def friend_item(friend: Friend, select: Callable[[], None]) -> ItemViewModel:
    return ItemViewModel(title=friend.name, subtitle=friend.phone, select=select)


def card_item(card: Card, select: Callable[[], None]) -> ItemViewModel:
    return ItemViewModel(title=card.number, subtitle=card.holder, select=select)


def transfer_item(
    transfer: Transfer,
    select: Callable[[], None],
    *,
    long_date_style: bool,
) -> ItemViewModel:
    """Project a transfer; the long style is used by the sent list."""
    amount = format_amount(transfer.amount, transfer.currency_code)
    title = f"{amount} • {transfer.description}"
    if long_date_style:
        subtitle = f"Sent to: {transfer.recipient} on {format_long_date(transfer.date)}"
    else:
        subtitle = f"Received from: {transfer.sender} on {format_short_date(transfer.date)}"
    return ItemViewModel(title=title, subtitle=subtitle, select=select)


def format_amount(amount: Decimal, currency_code: str) -> str:
    """Render ``amount`` with two decimals and thousands separators."""
    quantized = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{quantized:,.2f}"
    code = (currency_code or "").strip().upper()
    return f"{code} {text}" if code else text


def format_long_date(value: datetime) -> str:
    # e.g. "March 4, 2024 at 09:05"
    return f"{value.strftime('%B')} {value.day}, {value.year} at {value.strftime('%H:%M')}"


def format_short_date(value: datetime) -> str:
    return value.strftime("%d/%m/%Y, %H:%M")


__all__ = [
    "ItemViewModel",
    "card_item",
    "format_amount",
    "format_long_date",
    "format_short_date",
    "friend_item",
    "transfer_item",
]
