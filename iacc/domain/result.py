"""Two-armed result union delivered by every item-loading callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, transform: Callable[[T], U]) -> "Success[U]":
        """Apply ``transform`` to the carried value."""
        return Success(transform(self.value))


@dataclass(frozen=True)
class Failure:
    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    def map(self, transform: Callable[[object], object]) -> "Failure":
        """Failures pass through ``map`` untouched."""
        return self


Result = Union[Success[T], Failure]


__all__ = ["Failure", "Result", "Success"]
