"""Domain package exports for records, results, and ports."""

from .models import Card, Friend, Transfer, User
from .result import Failure, Result, Success

__all__ = [
    "Card",
    "Failure",
    "Friend",
    "Result",
    "Success",
    "Transfer",
    "User",
]
