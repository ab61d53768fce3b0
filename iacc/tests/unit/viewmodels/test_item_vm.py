from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from iacc.domain.models import Card, Friend, Transfer
from iacc.viewmodels.item_vm import card_item, format_amount, friend_item, transfer_item


def _transfer(**overrides) -> Transfer:
    data = dict(
        id="t",
        description="Rent",
        amount=Decimal("1234.5"),
        currency_code="gbp",
        sender="Bob",
        recipient="Landlord",
        is_sender=True,
        date=datetime(2024, 3, 4, 9, 5),
    )
    data.update(overrides)
    return Transfer(**data)


def test_friend_and_card_projection() -> None:
    assert friend_item(Friend(id="1", name="Ann", phone="555"), lambda: None).title == "Ann"
    card = card_item(Card(id="c", number="4242", holder="Ann"), lambda: None)
    assert (card.title, card.subtitle) == ("4242", "Ann")


def test_transfer_title_includes_amount_and_description() -> None:
    item = transfer_item(_transfer(), lambda: None, long_date_style=True)

    assert item.title == "GBP 1,234.50 • Rent"
    assert item.subtitle == "Sent to: Landlord on March 4, 2024 at 09:05"


def test_transfer_short_style_names_sender() -> None:
    item = transfer_item(_transfer(is_sender=False), lambda: None, long_date_style=False)

    assert item.subtitle == "Received from: Bob on 04/03/2024, 09:05"


def test_format_amount_without_currency() -> None:
    assert format_amount(Decimal("0.005"), "") == "0.01"
