# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Tests for the box bound representation used to constrain the multivariate search"""

import numpy as np
import pytest

from powellmin import minimize_powell
from powellmin.models.bounds import *
from powellmin.exceptions import UserConfigError


def test_bounds_construction():
    box = BoxBounds([(0, 1), None, (-np.inf, 5), (None, 2)], dims=5)
    assert box.dims == 5
    assert np.array_equal(box.lower, [0, -np.inf, -np.inf, -np.inf, -np.inf])
    assert np.array_equal(box.upper, [1, np.inf, 5, 2, np.inf])
    assert box.active
    # Unbounded defaults
    box = BoxBounds(dims=3)
    assert box.dims == 3
    assert not box.active
    assert BoxBounds().dims == 0

    with pytest.raises(UserConfigError):
        BoxBounds([(0, 1), (0, 1)], dims=1)
    with pytest.raises(UserConfigError):
        BoxBounds([(1, 0)])


def test_clamp_and_contains():
    box = BoxBounds([(-10, 10), None, (0, np.inf)])
    original = np.array([100.0, -100.0, -3.0])
    clamped = box.clamp(original)
    assert np.array_equal(clamped, [10, -100, 0])
    # The input is left untouched
    assert np.array_equal(original, [100, -100, -3])
    assert box.contains(clamped)
    assert not box.contains(original)


def test_step_limits_axis_directions():
    box = BoxBounds([(-1, 1), (-1, 1)])
    p = np.array([0.5, 0.0])
    assert box.step_limits(p, np.array([1.0, 0.0])) == (-1.5, 0.5)
    assert box.step_limits(p, np.array([0.0, 1.0])) == (-1.0, 1.0)
    assert box.step_limits(p, np.array([-1.0, 0.0])) == (-0.5, 1.5)


def test_step_limits_mixed_directions():
    box = BoxBounds([(0, 4), (0, 2)])
    p = np.array([1.0, 1.0])
    # Moving along (2, -1) the second coordinate hits its lower bound after a step of 1, the first its upper after 1.5
    t_min, t_max = box.step_limits(p, np.array([2.0, -1.0]))
    assert (t_min, t_max) == (-0.5, 1.0)
    # Every point along the limited segment is within the box
    for t in np.linspace(t_min, t_max, 11):
        assert box.contains(p + t * np.array([2.0, -1.0]))


def test_step_limits_unbounded():
    box = BoxBounds([None, (0, np.inf)])
    p = np.array([3.0, 2.0])
    assert box.step_limits(p, np.array([1.0, 0.0])) == (-np.inf, np.inf)
    assert box.step_limits(p, np.array([0.0, -2.0])) == (-np.inf, 1.0)
    # Zero components never limit the step
    assert box.step_limits(p, np.array([0.0, 0.0])) == (-np.inf, np.inf)


def test_open_box_searches_like_no_bounds():
    def f(x):
        return (x[0] - 3) ** 2 + (x[1] + 1) ** 2 + x[0] * x[1]

    open_box = BoxBounds([None, (-np.inf, np.inf)])
    assert not open_box.active
    x_open, report_open = minimize_powell(f, [0, 0], bounds=open_box, full_output=True)
    x_none, report_none = minimize_powell(f, [0, 0], full_output=True)
    assert np.array_equal(x_open, x_none)
    assert report_open.evaluations == report_none.evaluations
