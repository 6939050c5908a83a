"""Turns failed Results into click errors with kind-specific exit codes."""

from __future__ import annotations

from typing import TypeVar

import click

from storefront.domain.result import ErrorKind, Result

T = TypeVar("T")

EXIT_CODES = {
    ErrorKind.INVALID_ARGUMENT: 2,
    ErrorKind.INVALID_STATE: 3,
    ErrorKind.INSUFFICIENT_STOCK: 3,
    ErrorKind.NOT_FOUND: 4,
}


class ResultError(click.ClickException):
    """A business-rule failure reported to the terminal."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.exit_code = EXIT_CODES.get(kind, 1)


def unwrap(result: Result[T]) -> T:
    """Return the success value or abort the command."""
    if result.is_failure:
        raise ResultError(result.kind, result.error or "")  # type: ignore[arg-type]
    return result.value  # type: ignore[return-value]
