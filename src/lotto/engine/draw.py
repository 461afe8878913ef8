"""Weighted draws over a participant registry."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .random_source import RandomSource
from .registry import ParticipantRegistry
from .validation import require_ticket_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawOptions:
    """Options for a single draw.

    ``redrawable=False`` takes one ticket from the winner. ``None`` means ``True``.
    """

    redrawable: bool | None = True

    @property
    def keeps_ticket(self) -> bool:
        return self.redrawable is None or bool(self.redrawable)

    @classmethod
    def coerce(cls, options: DrawOptions | Mapping[str, Any] | None) -> DrawOptions:
        if options is None:
            return cls()
        if isinstance(options, DrawOptions):
            return options
        if isinstance(options, Mapping):
            return cls(redrawable=options.get("redrawable", True))
        raise TypeError(f"Unsupported draw options: {options!r}")


@dataclass(frozen=True)
class DrawMultipleOptions(DrawOptions):
    """Options for a batch draw; ``unique`` keeps only first occurrences."""

    unique: bool | None = False

    @classmethod
    def coerce(
        cls, options: DrawOptions | Mapping[str, Any] | None
    ) -> DrawMultipleOptions:
        if options is None:
            return cls()
        if isinstance(options, DrawMultipleOptions):
            return options
        if isinstance(options, DrawOptions):
            return cls(redrawable=options.redrawable)
        if isinstance(options, Mapping):
            return cls(
                redrawable=options.get("redrawable", True),
                unique=options.get("unique", False),
            )
        raise TypeError(f"Unsupported draw options: {options!r}")


class DrawEngine:
    """Select winners from a registry using a random source."""

    def __init__(self, registry: ParticipantRegistry, random_source: RandomSource) -> None:
        self.registry = registry
        self.random_source = random_source

    def draw(self, options: DrawOptions | Mapping[str, Any] | None = None) -> Any:
        """Draw one winner weighted by tickets, or ``None`` when the pool is empty."""
        resolved = DrawOptions.coerce(options)
        if self.registry.is_empty():
            return None

        total = self.registry.total_tickets()
        value = self.random_source.next()
        # r * total can round up to total when r is the largest float below 1.
        index = min(math.floor(value * total), total - 1)
        winner = self.registry.locate(index)

        if not resolved.keeps_ticket:
            self.registry.remove(winner, 1)

        logger.debug("Drew %r (r=%.6f, index=%d, total=%d).", winner, value, index, total)
        return winner

    def draw_multiple(
        self, count: Any, options: DrawOptions | Mapping[str, Any] | None = None
    ) -> list[Any]:
        """Draw up to ``count`` winners in sequence.

        Stops early when the pool runs out of tickets. With ``unique`` set,
        repeated winners are dropped after the batch, keeping draw order.
        """
        if not isinstance(count, bool) and count == 0:
            return []
        resolved = DrawMultipleOptions.coerce(options)
        target = require_ticket_count(count, argument="count")

        winners: list[Any] = []
        while len(winners) < target and not self.registry.is_empty():
            winner = self.draw(resolved)
            if winner is None:
                break
            winners.append(winner)

        if resolved.unique:
            winners = _first_occurrences(winners)

        logger.debug("Drew %d of %d requested winners.", len(winners), target)
        return winners


def _first_occurrences(values: list[Any]) -> list[Any]:
    distinct: list[Any] = []
    for value in values:
        if not any(value == seen for seen in distinct):
            distinct.append(value)
    return distinct
