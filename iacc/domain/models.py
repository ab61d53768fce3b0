"""Domain records owned by the friends, cards, and transfers sources."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Mapping


def _require_text(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{label} must be a non-empty string.")
    return value


def _parse_flag(value: Any, label: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"true", "1", "yes"}:
            return True
        if text in {"false", "0", "no"}:
            return False
    raise ValueError(f"{label} must be a boolean, got {value!r}.")


@dataclass(frozen=True)
class Friend:
    """Contact entry returned by the friends API and mirrored by the cache."""

    id: str
    name: str
    phone: str = ""

    def __post_init__(self) -> None:
        _require_text(self.id, "Friend.id")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Friend":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            phone=str(data.get("phone") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "phone": self.phone}


@dataclass(frozen=True)
class Card:
    """Payment card owned by the current user."""

    id: str
    number: str
    holder: str

    def __post_init__(self) -> None:
        _require_text(self.id, "Card.id")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Card":
        return cls(
            id=str(data["id"]),
            number=str(data.get("number") or ""),
            holder=str(data.get("holder") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "number": self.number, "holder": self.holder}


@dataclass(frozen=True)
class Transfer:
    """Money transfer; ``is_sender`` tells whether the current user sent it."""

    id: str
    description: str
    amount: Decimal
    currency_code: str
    sender: str
    recipient: str
    is_sender: bool
    date: datetime

    def __post_init__(self) -> None:
        _require_text(self.id, "Transfer.id")
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transfer":
        raw_date = data.get("date")
        if isinstance(raw_date, datetime):
            date = raw_date
        else:
            text = str(raw_date or "")
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            date = datetime.fromisoformat(text)
        return cls(
            id=str(data["id"]),
            description=str(data.get("description") or ""),
            amount=Decimal(str(data.get("amount", "0"))),
            currency_code=str(data.get("currency_code") or data.get("currencyCode") or ""),
            sender=str(data.get("sender") or ""),
            recipient=str(data.get("recipient") or ""),
            is_sender=_parse_flag(
                data.get("is_sender", data.get("isSender", False)), "Transfer.is_sender"
            ),
            date=date,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "amount": str(self.amount),
            "currency_code": self.currency_code,
            "sender": self.sender,
            "recipient": self.recipient,
            "is_sender": self.is_sender,
            "date": self.date.isoformat(),
        }


@dataclass(frozen=True)
class User:
    """Signed-in account; premium accounts get an on-device friends cache."""

    id: str
    name: str
    is_premium: bool = False


__all__ = ["Card", "Friend", "Transfer", "User"]
