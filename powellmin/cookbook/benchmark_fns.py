# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Prebuilt classic optimization test functions with their known minima."""

from __future__ import annotations

import numpy as np

from powellmin.models.benchmarks import Benchmark

__all__ = ['paraboloid', 'offset_quadratic', 'rosenbrock', 'booth', 'beale', 'matyas', 'goldstein_price',
           'mccormick', 'three_hump_camel']


def paraboloid(dims: int = 3) -> Benchmark:
    """
    Sum of squares in any number of dimensions, minimum of 0 at the origin. Suggested region is [-1, 1] per dimension.
    """
    def sum_of_squares(x):
        x = np.asarray(x)
        return np.sum(x * x)

    return Benchmark(sum_of_squares, np.zeros(dims), np.full(dims, 0.5), [(-1, 1)] * dims, name='paraboloid')


def offset_quadratic(centre) -> Benchmark:
    """
    Separable quadratic bowl centred on an arbitrary point, searched unbounded from the origin.

    Parameters
    ----------
    centre: array-like
        The location of the minimum
    """
    centre = np.array(centre, dtype=float)

    def bowl(x):
        d = np.asarray(x) - centre
        return np.sum(d * d)

    return Benchmark(bowl, centre, np.zeros(len(centre)), name='offset quadratic')


def rosenbrock(dims: int = 2) -> Benchmark:
    """
    The n-dimensional Rosenbrock valley, minimum of 0 at (1, 1, ..., 1). Suggested start is (0, 0.1, 0.2, ...).

    For fewer than two dimensions the sum has no terms and the function is identically zero.
    """
    def rosen(x):
        x = np.asarray(x)
        return np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (x[:-1] - 1) ** 2)

    return Benchmark(rosen, np.ones(dims), np.arange(dims) / 10, [(-10, 10)] * dims, name='rosenbrock')


def booth() -> Benchmark:
    def booth_fn(x):
        return (x[0] + 2 * x[1] - 7) ** 2 + (2 * x[0] + x[1] - 5) ** 2

    return Benchmark(booth_fn, [1, 3], [0, 0], [(-10, 10), (-10, 10)], name='booth')


def beale() -> Benchmark:
    def beale_fn(x):
        return (1.5 - x[0] + x[0] * x[1]) ** 2 + (2.25 - x[0] + x[0] * x[1] ** 2) ** 2 + \
            (2.625 - x[0] + x[0] * x[1] ** 3) ** 2

    return Benchmark(beale_fn, [3, 0.5], [2, 0], [(-4.5, 4.5), (-4.5, 4.5)], name='beale')


def matyas() -> Benchmark:
    def matyas_fn(x):
        return 0.26 * (x[0] * x[0] + x[1] * x[1]) - 0.48 * x[0] * x[1]

    return Benchmark(matyas_fn, [0, 0], [1, 1], [(-10, 10), (-10, 10)], name='matyas')


def goldstein_price() -> Benchmark:
    """The Goldstein-Price function, global minimum of 3 at (0, -1) with several local minima nearby."""
    def gp_fn(x):
        a = 1 + (x[0] + x[1] + 1) ** 2 * \
            (19 - 14 * x[0] + 3 * x[0] ** 2 - 14 * x[1] + 6 * x[0] * x[1] + 3 * x[1] ** 2)
        b = 30 + (2 * x[0] - 3 * x[1]) ** 2 * \
            (18 - 32 * x[0] + 12 * x[0] ** 2 + 48 * x[1] - 36 * x[0] * x[1] + 27 * x[1] ** 2)
        return a * b

    return Benchmark(gp_fn, [0, -1], [0, 0], [(-2.5, 2.5), (-2.5, 2.5)], name='goldstein-price')


def mccormick() -> Benchmark:
    """The McCormick function, minimum of roughly -1.9133 at (-0.54719, -1.54719)."""
    def mccormick_fn(x):
        return np.sin(x[0] + x[1]) + (x[0] - x[1]) ** 2 - 1.5 * x[0] + 2.5 * x[1] + 1

    return Benchmark(mccormick_fn, [-0.54719, -1.54719], [0, 0], [(-1.5, 4), (-3, 4)], name='mccormick')


def three_hump_camel() -> Benchmark:
    def camel_fn(x):
        return 2 * x[0] ** 2 - 1.05 * x[0] ** 4 + x[0] ** 6 / 6 + x[0] * x[1] + x[1] ** 2

    return Benchmark(camel_fn, [0, 0], [1, 1], [(-5, 5), (-5, 5)], name='three-hump camel')
