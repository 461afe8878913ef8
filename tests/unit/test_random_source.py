from __future__ import annotations

import numpy as np
import pytest

from lotto.engine.errors import InvalidRandomValueError
from lotto.engine.random_source import RandomSource


def test_default_generator_stays_in_unit_interval():
    source = RandomSource(seed=11)
    values = [source.next() for _ in range(1000)]

    assert not source.is_custom
    assert all(0.0 <= value < 1.0 for value in values)


def test_default_generator_is_reproducible_with_seed():
    first = RandomSource(seed=5)
    second = RandomSource(seed=5)

    assert [first.next() for _ in range(20)] == [second.next() for _ in range(20)]


def test_custom_function_values_are_passed_through():
    values = iter([0.0, 0.5, 0.999])
    source = RandomSource(lambda: next(values))

    assert source.is_custom
    assert [source.next(), source.next(), source.next()] == [0.0, 0.5, 0.999]


def test_numpy_floats_are_accepted():
    source = RandomSource(lambda: np.float64(0.25))
    assert source.next() == 0.25


@pytest.mark.parametrize("bad_value", [1.0, 1.5, -0.1, float("nan"), "0.5", None, True])
def test_out_of_contract_values_raise(bad_value):
    source = RandomSource(lambda: bad_value)

    with pytest.raises(InvalidRandomValueError, match=r"\[0, 1\)"):
        source.next()


def test_non_callable_random_is_rejected():
    with pytest.raises(TypeError):
        RandomSource(0.5)
