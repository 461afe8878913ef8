"""Errors raised by the draw engine."""

from __future__ import annotations

from typing import Any


class LottoError(ValueError):
    """Base class for lotto errors."""


class InvalidTicketCountError(LottoError):
    """Raised when a ticket count argument is not a natural number."""

    def __init__(self, value: Any, argument: str = "tickets") -> None:
        self.value = value
        self.argument = argument
        super().__init__(f"'{argument}' must be a natural number (integer >= 1), got {value!r}.")


class InvalidRandomValueError(LottoError):
    """Raised when a custom random function returns a value outside [0, 1)."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Random function returned {value!r}; expected a number in [0, 1).")
