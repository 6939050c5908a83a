"""Result type returned by aggregate operations and application handlers.

Expected business outcomes (wrong status, out-of-range quantity, missing
stock) travel as values so callers can map them to a response without
try/except ladders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    INVALID_STATE = "INVALID_STATE"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class Result(Generic[T]):
    is_success: bool
    value: T | None = None
    error: str | None = None
    kind: ErrorKind | None = None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def ok(value: T | None = None) -> Result[T]:
        return Result(is_success=True, value=value)

    @staticmethod
    def fail(kind: ErrorKind, error: str) -> Result[T]:
        return Result(is_success=False, error=error, kind=kind)

    def __str__(self) -> str:
        if self.is_success:
            return "Ok"
        return f"{self.kind.value}: {self.error}"  # type: ignore[union-attr]
