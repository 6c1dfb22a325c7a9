# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Outward expanding search that brackets a local minimum of a function of one variable."""

from __future__ import annotations

import math

from powellmin.helpers import logger, _drive
from powellmin.exceptions import UserConfigError

__all__ = ['bracket_minimum']

# Once the step has been grown this many times without bracketing anything the function is assumed to have no minimum
# in the search direction. The step overflows to infinity long before this count is reached for any finite start step.
MAX_EXPANSIONS = 100
# The first expansions double the step, afterwards the growth rate itself increases with each expansion
NUM_DOUBLING_STEPS = 2


def _bracket(guess: float, step: float, lower: float, upper: float):
    """
    Generator form of the bracketing search. Yields abscissae to evaluate and expects the function value sent back,
    returns the bracket as a (low, high) tuple, or (nan, nan) if no minimum could be bracketed.
    """
    if lower == upper:
        return lower, upper
    if step == 0:
        return guess, guess

    x_lo = x_hi = guess
    f_lo = f_hi = f_min = f_guess = yield guess

    # Stays True only while every sampled value equals the starting value
    flat = True
    bounded = False
    expansions = 0
    while not bounded:
        expansions += 1
        bounded = True

        # Step outwards on any side that is still at least as good as the best value seen so far
        if f_lo <= f_min:
            f_min = f_lo
            x_lo = max(lower, x_lo - step)
            f_lo = yield x_lo
            flat = flat and f_lo == f_guess
            bounded = False
        if f_hi <= f_min:
            f_min = f_hi
            x_hi = min(upper, x_hi + step)
            f_hi = yield x_hi
            flat = flat and f_hi == f_guess
            bounded = False

        f_min = min(f_min, f_lo, f_hi)
        # Best value sitting on a domain limit means the minimum is bracketed against that limit
        if (f_lo == f_min and x_lo == lower) or (f_hi == f_min and x_hi == upper):
            bounded = True

        # We have no idea what magnitude the answer has, so grow the step at an accelerating rate
        step *= 2 if expansions <= NUM_DOUBLING_STEPS else math.exp((expansions + 1) * 0.5)
        if not bounded and (not math.isfinite(step) or expansions >= MAX_EXPANSIONS):
            if flat:
                # Nothing but the starting value anywhere the search looked, the function is constant
                return guess, guess
            logger.debug(f'Failed to bracket a minimum starting from {guess} after {expansions} expansions.')
            return math.nan, math.nan

    return (guess, guess) if flat else (x_lo, x_hi)


def bracket_minimum(func, guess: float = 0.0, initial_step: float = 1.0,
                    lower_limit: float = -math.inf, upper_limit: float = math.inf) -> tuple[float, float]:
    """
    Find an interval that contains a local minimum of a function of one variable.

    Starting from 'guess', the search steps outwards on whichever sides the function keeps decreasing, growing the step
    each time, until the function turns back upwards or a domain limit is reached.

    Parameters
    ----------
    func: callable
        Function of one float argument returning a float
    guess: float, optional
        Point to start the search from (default 0)
    initial_step: float, optional
        Size of the first outward step (default 1)
    lower_limit: float, optional
        The search never steps below this value (default -inf)
    upper_limit: float, optional
        The search never steps above this value (default inf)

    Returns
    -------
    tuple of float
        The bracket (low, high) with low <= high, or (nan, nan) if the function keeps decreasing without limit
    """
    if lower_limit > upper_limit:
        raise UserConfigError(f'Lower limit {lower_limit} exceeds upper limit {upper_limit}.')
    if initial_step < 0:
        raise UserConfigError(f'The initial bracketing step must be non-negative, got {initial_step}.')
    bracket, _ = _drive(_bracket(guess, initial_step, lower_limit, upper_limit), func)
    return bracket
