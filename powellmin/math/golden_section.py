# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Golden section search over a closed interval, the refinement stage of the line minimizer."""

from __future__ import annotations

import math

from powellmin.helpers import logger, _drive
from powellmin.exceptions import UserConfigError
from powellmin.models.reports import LineSearchReport

__all__ = ['golden_section_minimize']

# Fraction of the interval that survives each golden section iteration, approximately 0.618 (i.e., 1 / golden ratio)
GF1 = 2 / (1 + (5**0.5))


def _golden_section(lower: float, upper: float, tolerance: float, max_iter: int):
    """
    Generator form of the golden section search. Yields abscissae to evaluate and expects the function value sent back,
    returns a tuple of the minimum location (None on numerical failure) and a LineSearchReport.
    """
    report = LineSearchReport()
    x1 = upper - GF1 * (upper - lower)
    x2 = lower + GF1 * (upper - lower)
    f1 = yield x1
    f2 = yield x2
    # The interior probes can only ever approach the ends of the interval, so the end values are kept for comparison
    # in case the true minimum sits right on (or asymptotically towards) one of the bounds
    x_lower, x_upper = lower, upper
    f_lower = yield lower
    f_upper = yield upper

    # Every iteration discards the side beyond the worse probe, the surviving probe and its value carry over
    iteration = 1
    while iteration < max_iter and abs(upper - lower) > tolerance:
        if f2 > f1:
            upper = x2
            x2, f2 = x1, f1
            x1 = upper - GF1 * (upper - lower)
            f1 = yield x1
        else:
            lower = x1
            x1, f1 = x2, f2
            x2 = lower + GF1 * (upper - lower)
            f2 = yield x2
        iteration += 1

    report.iterations = iteration
    report.argmin = 0.5 * (upper + lower)
    report.minimum = 0.5 * (f1 + f2)

    if math.isnan(f1) or math.isnan(f2):
        return None, report
    if iteration == max_iter:
        logger.debug(f'Golden section search hit max iterations, interval width is still {abs(upper - lower)}.')
        return report.argmin, report

    report.converged = True
    if f_lower < report.minimum:
        report.argmin, report.minimum = x_lower, f_lower
    elif f_upper < report.minimum:
        report.argmin, report.minimum = x_upper, f_upper
    return report.argmin, report


def _check_settings(tolerance: float, max_iter: int):
    if tolerance < 0:
        raise UserConfigError(f'Tolerance must be non-negative, got {tolerance}.')
    if max_iter < 1:
        raise UserConfigError(f'The iteration budget must be at least 1, got {max_iter}.')


def golden_section_minimize(func, lower: float, upper: float, tolerance: float = 1e-8, max_iter: int = 100,
                            full_output: bool = False):
    """
    Minimize a function of one variable within the closed interval [lower, upper] using golden section search.

    Parameters
    ----------
    func: callable
        Function of one float argument returning a float
    lower: float
        Lower end of the search interval
    upper: float
        Upper end of the search interval
    tolerance: float, optional
        The search stops once the interval is no wider than this (default 1e-8)
    max_iter: int, optional
        Maximum number of iterations, one function evaluation is made per iteration (default 100)
    full_output: bool, optional
        If True, a LineSearchReport is returned alongside the minimum location (default False)

    Returns
    -------
    float or None
        The location of the minimum. If the iteration budget runs out the midpoint of the remaining interval is
        returned and the report is flagged as not converged. None if the function evaluated to NaN.
    LineSearchReport, optional
        Diagnostic record of the search, only returned if 'full_output' is True
    """
    _check_settings(tolerance, max_iter)
    if lower > upper:
        raise UserConfigError(f'Lower end {lower} of the search interval exceeds upper end {upper}.')
    (x, report), evals = _drive(_golden_section(lower, upper, tolerance, max_iter), func)
    report.evaluations = evals
    return (x, report) if full_output else x
