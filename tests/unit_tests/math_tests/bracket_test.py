# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Tests for the outward expanding bracketing search"""

import math
import pytest

from powellmin.math import bracket_minimum
from powellmin.math.bracket import _bracket
from powellmin.exceptions import UserConfigError


def test_bracket_parabola():
    evaluated = []

    def parab(x):
        evaluated.append(x)
        return x * (x - 2)

    lo, hi = bracket_minimum(parab, guess=0, initial_step=1)
    assert (lo, hi) == (-1, 3)
    assert lo < 1 < hi
    # Guess first, then one step out each side, then only the side that kept decreasing
    assert evaluated == [0, -1, 1, 3]


def test_bracket_against_limit():
    # Function increases away from the lower limit, so the bracket is pinned to the limit
    assert bracket_minimum(lambda x: x * (x - 2), guess=6.0, lower_limit=6.0) == (6.0, 7.0)
    # Function decreases all the way to the upper limit, the step growth overshoots and is clipped
    assert bracket_minimum(lambda x: -x, guess=0.0, upper_limit=10.0) == (-1.0, 10.0)


def test_bracket_unbounded_failure():
    lo, hi = bracket_minimum(lambda x: -x * x)
    assert math.isnan(lo) and math.isnan(hi)
    lo, hi = bracket_minimum(lambda x: -x, initial_step=1e-6)
    assert math.isnan(lo) and math.isnan(hi)


def test_bracket_degenerate_cases():
    calls = []

    def tracked(x):
        calls.append(x)
        return x

    # Zero width domain, nothing needs to be evaluated
    assert bracket_minimum(tracked, guess=2.0, lower_limit=2.0, upper_limit=2.0) == (2.0, 2.0)
    assert calls == []
    # Zero step size
    assert bracket_minimum(tracked, guess=1.5, initial_step=0) == (1.5, 1.5)
    # Flat function is considered bracketed at the guess once the search has looked everywhere it can
    assert bracket_minimum(lambda x: 5.0, guess=3.0) == (3.0, 3.0)
    assert bracket_minimum(lambda x: 5.0, guess=3.0, lower_limit=3.0) == (3.0, 3.0)


def test_bracket_symmetric_neighbours():
    # Both first neighbours match the value at the guess, but the guess is a local maximum
    lo, hi = bracket_minimum(lambda x: x ** 4 - x * x, guess=0.0)
    assert (lo, hi) == (-3.0, 3.0)


def test_bracket_generator_protocol():
    steps = _bracket(0.0, 1.0, -math.inf, math.inf)
    assert next(steps) == 0.0
    assert steps.send(0.0) == -1.0
    assert steps.send(3.0) == 1.0
    assert steps.send(-1.0) == 3.0
    with pytest.raises(StopIteration) as done:
        steps.send(3.0)
    assert done.value.value == (-1.0, 3.0)


def test_bracket_config_errors():
    with pytest.raises(UserConfigError):
        bracket_minimum(lambda x: x, lower_limit=1, upper_limit=0)
    with pytest.raises(UserConfigError):
        bracket_minimum(lambda x: x, initial_step=-1)
