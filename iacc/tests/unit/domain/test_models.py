from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from iacc.domain.models import Friend, Transfer
from iacc.domain.result import Failure, Success


def test_friend_requires_id() -> None:
    with pytest.raises(ValueError):
        Friend(id=" ", name="Ann")


def test_transfer_coerces_amount_to_decimal() -> None:
    transfer = Transfer(
        id="t",
        description="x",
        amount=12.1,
        currency_code="EUR",
        sender="a",
        recipient="b",
        is_sender=False,
        date=datetime(2024, 1, 1),
    )

    assert transfer.amount == Decimal("12.1")


def test_transfer_dict_round_trip() -> None:
    payload = {
        "id": "t",
        "description": "x",
        "amount": "3.10",
        "currencyCode": "EUR",
        "sender": "a",
        "recipient": "b",
        "isSender": True,
        "date": "2024-01-01T10:00:00",
    }

    transfer = Transfer.from_dict(payload)

    assert transfer.currency_code == "EUR"
    assert transfer.is_sender is True
    assert Transfer.from_dict(transfer.to_dict()) == transfer


def test_result_map_only_touches_success() -> None:
    error = RuntimeError("x")

    assert Success([1, 2]).map(len) == Success(2)
    assert Failure(error).map(len) == Failure(error)


def _transfer_payload(**overrides):
    payload = {"id": "t", "amount": "1", "date": "2024-01-01T10:00:00"}
    payload.update(overrides)
    return payload


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(True, True), (False, False), ("false", False), ("True", True), ("0", False), (1, True)],
)
def test_transfer_direction_flag_parsing(raw, expected) -> None:
    assert Transfer.from_dict(_transfer_payload(is_sender=raw)).is_sender is expected


@pytest.mark.parametrize("raw", ["maybe", None, 2, ""])
def test_transfer_rejects_ambiguous_direction(raw) -> None:
    with pytest.raises(ValueError):
        Transfer.from_dict(_transfer_payload(isSender=raw))
