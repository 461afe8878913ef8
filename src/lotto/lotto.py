"""Lotto facade over the participant registry and draw engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .engine.draw import DrawEngine, DrawMultipleOptions, DrawOptions
from .engine.random_source import RandomFunction, RandomSource
from .engine.registry import ParticipantRegistry


class Lotto:
    """Weighted lottery over participants holding tickets.

    ``random`` replaces the default uniform generator and must return floats
    in ``[0, 1)``; ``seed`` seeds the default generator.
    """

    def __init__(self, random: RandomFunction | None = None, *, seed: int | None = None) -> None:
        self._registry = ParticipantRegistry()
        self._engine = DrawEngine(self._registry, RandomSource(random, seed=seed))

    def add(self, participant: Any, tickets: Any = 1) -> Lotto:
        """Give a participant more tickets."""
        self._registry.add(participant, tickets)
        return self

    def remove(self, participant: Any, tickets: Any = None) -> Lotto:
        """Take tickets from a participant; all of them when ``tickets`` is omitted."""
        self._registry.remove(participant, tickets)
        return self

    def draw(self, options: DrawOptions | Mapping[str, Any] | None = None) -> Any:
        """Draw a winning ticket and return the participant holding it."""
        return self._engine.draw(options)

    def draw_multiple(
        self, count: Any, options: DrawMultipleOptions | Mapping[str, Any] | None = None
    ) -> list[Any]:
        """Draw up to ``count`` winning tickets and return their holders."""
        return self._engine.draw_multiple(count, options)

    @property
    def total_tickets(self) -> int:
        return self._registry.total_tickets()

    @property
    def participants(self) -> list[tuple[Any, int]]:
        """Return ``(participant, tickets)`` pairs in insertion order."""
        return self._registry.entries()

    def tickets_of(self, participant: Any) -> int:
        return self._registry.tickets_of(participant)

    def is_empty(self) -> bool:
        return self._registry.is_empty()

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, participant: object) -> bool:
        return participant in self._registry
