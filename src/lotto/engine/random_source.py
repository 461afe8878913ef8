"""Uniform random source with a validated [0, 1) contract."""

from __future__ import annotations

import math
from collections.abc import Callable
from numbers import Real

import numpy as np

from .errors import InvalidRandomValueError

RandomFunction = Callable[[], float]


class RandomSource:
    """Wrap a caller-supplied random function or a seeded numpy generator."""

    def __init__(self, random: RandomFunction | None = None, *, seed: int | None = None) -> None:
        if random is not None and not callable(random):
            raise TypeError("random must be a callable returning a float in [0, 1).")

        self._random = random
        self._generator = np.random.default_rng(seed)

    @property
    def is_custom(self) -> bool:
        """Return whether a caller-supplied function is installed."""
        return self._random is not None

    def next(self) -> float:
        """Return the next value in [0, 1)."""
        if self._random is None:
            return float(self._generator.random())

        value = self._random()
        if not self._is_valid(value):
            raise InvalidRandomValueError(value)
        return float(value)

    @staticmethod
    def _is_valid(value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        number = float(value)
        return not math.isnan(number) and 0.0 <= number < 1.0
