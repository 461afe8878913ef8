"""Weighted lottery draws over participants holding tickets."""

from .engine import (
    DrawMultipleOptions,
    DrawOptions,
    InvalidRandomValueError,
    InvalidTicketCountError,
    LottoError,
)
from .factory import LottoOptions, create_lotto, create_lotto_from_config
from .lotto import Lotto

__all__ = [
    "DrawMultipleOptions",
    "DrawOptions",
    "InvalidRandomValueError",
    "InvalidTicketCountError",
    "Lotto",
    "LottoError",
    "LottoOptions",
    "create_lotto",
    "create_lotto_from_config",
]
