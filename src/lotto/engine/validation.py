"""Predicates for ticket counts and absent values."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

from .errors import InvalidTicketCountError


def is_missing(value: Any) -> bool:
    """Return whether the value is absent."""
    return value is None


def is_natural_number(value: Any) -> bool:
    """Return whether the value is an integer >= 1.

    Integral floats such as ``2.0`` count; ``bool`` does not.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return int(value) >= 1
    if isinstance(value, Real):
        number = float(value)
        return math.isfinite(number) and number >= 1 and number.is_integer()
    return False


def require_ticket_count(value: Any, argument: str = "tickets") -> int:
    """Return the value as ``int`` or raise ``InvalidTicketCountError``."""
    if not is_natural_number(value):
        raise InvalidTicketCountError(value, argument=argument)
    return int(value)
