"""Draw engine modules."""

from .draw import DrawEngine, DrawMultipleOptions, DrawOptions
from .errors import InvalidRandomValueError, InvalidTicketCountError, LottoError
from .random_source import RandomSource
from .registry import Participant, ParticipantRegistry
from .validation import is_missing, is_natural_number, require_ticket_count

__all__ = [
    "DrawEngine",
    "DrawMultipleOptions",
    "DrawOptions",
    "InvalidRandomValueError",
    "InvalidTicketCountError",
    "LottoError",
    "Participant",
    "ParticipantRegistry",
    "RandomSource",
    "is_missing",
    "is_natural_number",
    "require_ticket_count",
]
