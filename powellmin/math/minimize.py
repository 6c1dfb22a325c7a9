# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""One-dimensional minimization combining bracketing with golden section refinement."""

from __future__ import annotations

import math

from powellmin.helpers import logger, _drive, _drive_async
from powellmin.exceptions import UserConfigError
from powellmin.models.reports import LineSearchReport
from powellmin.math.bracket import _bracket
from powellmin.math.golden_section import _golden_section, _check_settings

__all__ = ['minimize_golden_section_1d', 'minimize_golden_section_1d_async']


def _line_search(lower: float, upper: float, tolerance: float, initial_step: float, max_iter: int,
                 guess: float = None):
    """
    Generator form of the one-dimensional minimizer. Yields abscissae to evaluate and expects the function value sent
    back, returns a tuple of the minimum location (nan on failure) and a LineSearchReport.
    """
    if math.isfinite(lower) and math.isfinite(upper):
        # A closed interval needs no bracketing, the whole of it is searched directly
        lo, hi = lower, upper
    else:
        if guess is None:
            if math.isfinite(lower):
                guess = 0.5 * (lower + upper) if math.isfinite(upper) else lower
            else:
                guess = upper if math.isfinite(upper) else 0.0
        lo, hi = yield from _bracket(guess, initial_step, lower, upper)
        if math.isnan(lo) or math.isnan(hi):
            report = LineSearchReport()
            report.minimum = math.nan
            return math.nan, report

    x, report = yield from _golden_section(lo, hi, tolerance, max_iter)
    return (math.nan if x is None else x), report


def _prepare(tolerance, initial_step, lower_bound, upper_bound, max_iter) -> tuple[float, float]:
    _check_settings(tolerance, max_iter)
    if initial_step < 0:
        raise UserConfigError(f'The initial bracketing step must be non-negative, got {initial_step}.')
    lower = -math.inf if lower_bound is None else float(lower_bound)
    upper = math.inf if upper_bound is None else float(upper_bound)
    if lower > upper:
        raise UserConfigError(f'Lower bound {lower} exceeds upper bound {upper}.')
    return lower, upper


def _finish(x: float, report: LineSearchReport, evals: int, full_output: bool):
    report.evaluations = evals
    if math.isnan(x):
        logger.warning('One-dimensional minimization failed, no minimum could be bracketed or the function is NaN.')
    elif not report.converged:
        logger.warning('One-dimensional minimization hit max iterations, obtained result may have reduced precision.')
    return (x, report) if full_output else x


def minimize_golden_section_1d(func, tolerance: float = 1e-8, initial_step: float = 1.0, lower_bound: float = None,
                               upper_bound: float = None, max_iter: int = 100, guess: float = None,
                               full_output: bool = False):
    """
    Find a local minimum of a function of one variable, optionally restricted to an interval.

    If both bounds are finite the interval is searched directly using golden section search. Otherwise a bracket around
    a minimum is first found by stepping outwards from a starting guess, then refined the same way.

    Parameters
    ----------
    func: callable
        Function of one float argument returning a float
    tolerance: float, optional
        Width of the final search interval (default 1e-8)
    initial_step: float, optional
        Size of the first outward bracketing step (default 1)
    lower_bound: float, optional
        The minimum is searched for at or above this value, None or -inf for no limit (default None)
    upper_bound: float, optional
        The minimum is searched for at or below this value, None or inf for no limit (default None)
    max_iter: int, optional
        Maximum number of golden section iterations (default 100)
    guess: float, optional
        Starting point for the bracketing search, by default chosen from the bounds or 0 if there are none
    full_output: bool, optional
        If True, a LineSearchReport is returned alongside the minimum location (default False)

    Returns
    -------
    float
        The location of the minimum, nan if no minimum could be bracketed or the function evaluated to NaN
    LineSearchReport, optional
        Diagnostic record of the search, only returned if 'full_output' is True

    Example
    -------
    >>> minimize_golden_section_1d(lambda x: x * (x - 2), lower_bound=6)
    6.0
    """
    lower, upper = _prepare(tolerance, initial_step, lower_bound, upper_bound, max_iter)
    (x, report), evals = _drive(_line_search(lower, upper, tolerance, initial_step, max_iter, guess), func)
    return _finish(x, report, evals, full_output)


async def minimize_golden_section_1d_async(func, tolerance: float = 1e-8, initial_step: float = 1.0,
                                           lower_bound: float = None, upper_bound: float = None, max_iter: int = 100,
                                           guess: float = None, full_output: bool = False):
    """
    Awaitable variant of minimize_golden_section_1d for objectives that return awaitables, such as coroutine functions.
    Evaluations are still made one at a time in the same order as the synchronous version.
    """
    lower, upper = _prepare(tolerance, initial_step, lower_bound, upper_bound, max_iter)
    (x, report), evals = await _drive_async(
        _line_search(lower, upper, tolerance, initial_step, max_iter, guess), func)
    return _finish(x, report, evals, full_output)
