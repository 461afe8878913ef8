"""Ordered registry of participants and their ticket counts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from .validation import is_missing, require_ticket_count

logger = logging.getLogger(__name__)


@dataclass
class Participant:
    """Registry-owned record of one identity and its tickets."""

    identity: Any
    tickets: int


class ParticipantRegistry:
    """Hold participants in insertion order.

    Identities are compared with ``==`` only, so they do not need to be
    hashable. An entry whose ticket count drops below 1 is deleted.
    """

    def __init__(self) -> None:
        self._participants: list[Participant] = []

    def add(self, identity: Any, tickets: Any = 1) -> None:
        """Add tickets for an identity, creating its entry when unseen."""
        count = require_ticket_count(tickets)
        existing = self._find(identity)
        if existing is not None:
            existing.tickets += count
            return
        self._participants.append(Participant(identity=identity, tickets=count))

    def remove(self, identity: Any, tickets: Any = None) -> None:
        """Remove tickets for an identity, or its whole entry when tickets is omitted."""
        count = None if is_missing(tickets) else require_ticket_count(tickets)

        position = self._position(identity)
        if position is None:
            return

        entry = self._participants[position]
        if count is not None:
            entry.tickets -= count
            if entry.tickets >= 1:
                return

        del self._participants[position]
        logger.debug("Removed participant %r from registry.", identity)

    def total_tickets(self) -> int:
        """Return the sum of all ticket counts."""
        return sum(entry.tickets for entry in self._participants)

    def is_empty(self) -> bool:
        """Return whether no entries remain."""
        return not self._participants

    def tickets_of(self, identity: Any) -> int:
        """Return the ticket count held by an identity, 0 when absent."""
        entry = self._find(identity)
        return entry.tickets if entry is not None else 0

    def entries(self) -> list[tuple[Any, int]]:
        """Return ``(identity, tickets)`` snapshots in insertion order."""
        return [(entry.identity, entry.tickets) for entry in self._participants]

    def weights(self) -> np.ndarray:
        """Return ticket counts as an int64 array in insertion order."""
        return np.array([entry.tickets for entry in self._participants], dtype=np.int64)

    def locate(self, index: int) -> Any:
        """Return the identity whose ticket range contains ``index``.

        Entry ``k`` owns ``[t1 + ... + t(k-1), t1 + ... + tk)``.
        """
        boundaries = np.cumsum(self.weights())
        if index < 0 or boundaries.size == 0 or index >= int(boundaries[-1]):
            raise IndexError(f"Ticket index {index} is outside the pool.")

        position = int(np.searchsorted(boundaries, index, side="right"))
        return self._participants[position].identity

    def __len__(self) -> int:
        return len(self._participants)

    def __contains__(self, identity: object) -> bool:
        return self._position(identity) is not None

    def _find(self, identity: Any) -> Participant | None:
        position = self._position(identity)
        return self._participants[position] if position is not None else None

    def _position(self, identity: Any) -> int | None:
        for position, entry in enumerate(self._participants):
            if entry.identity == identity:
                return position
        return None
