# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""powellmin top-level multivariate minimization functions"""

from __future__ import annotations

import numpy as np

from powellmin.models import BoxBounds, PowellReport
from powellmin.math.minimize import _line_search
from powellmin.math.golden_section import _check_settings
from powellmin.exceptions import InvalidTypeError
from powellmin.helpers import logger, _drive, _drive_async, _remap_requests

__all__ = ['minimize_powell', 'minimize_powell_async']

# Initial bracketing step used by every line search, line tolerances are expressed relative to this step
LINE_STEP = 0.1


def _line_search_along(origin: np.ndarray, direction: np.ndarray, bounds: BoxBounds,
                       tolerance: float, max_iter: int):
    """Minimize along the line origin + t * direction within the box, returns the best step length t (nan on failure)."""
    t_min, t_max = bounds.step_limits(origin, direction) if bounds.active else (-np.inf, np.inf)
    steps = _line_search(t_min, t_max, tolerance, LINE_STEP, max_iter)
    # A fresh array is built for every evaluation, the objective never shares memory with the search state
    t, _ = yield from _remap_requests(steps, lambda t: origin + t * direction)
    return t


def _powell(x0: np.ndarray, bounds: BoxBounds, max_iter: int, max_iter_line: int, line_tol: float, tol: float,
            verbose: bool, report: PowellReport):
    """
    Generator form of Powell's method. Yields points to evaluate and expects the objective value sent back, returns
    the final point or None if a line search failed. The report is filled in as the search progresses.
    """
    n = len(x0)
    p = bounds.clamp(x0)
    report.add_point(p)
    if n == 0:
        report.converged, report.message = True, 'no dimensions'
        return p

    def finish(message: str, converged: bool = True):
        report.converged, report.message = converged, message
        logger.debug(f'Powell minimization stopped after {report.iterations} iterations: {message}.')

    # Search directions start as the standard basis, each row is one direction
    directions = list(np.eye(n))
    prev_err = 0.0
    for iteration in range(1, max_iter):
        report.iterations = iteration
        # Directions gradually become linearly dependent, so periodically start over from the standard basis
        if iteration % n == 0:
            directions = list(np.eye(n))

        p_start = p.copy()
        # Minimize along each search direction in turn, each search starting from where the previous one ended
        for u in directions:
            t = yield from _line_search_along(p.copy(), u, bounds, line_tol, max_iter_line)
            if np.isnan(t):
                logger.warning(f'Line search failed along direction {u} from point {p}, aborting minimization.')
                finish('line search failed', converged=False)
                return None
            if t == 0:
                finish('zero step')
                return p
            p = bounds.clamp(p + t * u)
            report.add_point(p)

        # Replace the oldest direction with the net displacement over the full cycle
        directions.pop(0)
        u_new = p - p_start
        norm = np.sqrt(np.sum(u_new * u_new))
        if norm == 0:
            # Nothing moved at all, typically because the point is pinned against the bounds
            finish('zero displacement')
            return p
        u_new = u_new / norm
        directions.append(u_new)

        # One more minimization, this time along the new direction
        t = yield from _line_search_along(p.copy(), u_new, bounds, line_tol, max_iter_line)
        if np.isnan(t):
            logger.warning(f'Line search failed along direction {u_new} from point {p}, aborting minimization.')
            finish('line search failed', converged=False)
            return None
        if t == 0 or not np.isfinite(t):
            finish('zero step' if t == 0 else 'non-finite step')
            return p

        du = t * u_new
        err = np.sqrt(np.sum(du * du))
        p = bounds.clamp(p + du)
        report.add_point(p)

        ratio = err / prev_err if prev_err > 0 else np.inf
        if verbose:
            fp = yield p.copy()
            logger.info(f'Iteration {iteration}: {ratio} f({p}) = {fp}')
        if ratio < tol:
            finish('relative step below tolerance')
            return p
        prev_err = err

    logger.warning(f'Powell minimization hit max iterations ({max_iter}), obtained result may have reduced precision.')
    finish('maximum iterations reached', converged=False)
    return p


def _prepare(x0, max_iter, max_iter_line_search, line_tolerance, tolerance, bounds) -> tuple:
    x0 = np.array(x0, dtype=float)
    if x0.ndim != 1:
        raise InvalidTypeError(f'The starting point must be a one dimensional sequence, got shape {x0.shape}.')
    _check_settings(tolerance, max_iter)
    line_tolerance = tolerance if line_tolerance is None else line_tolerance
    _check_settings(line_tolerance, max_iter_line_search)
    box = bounds if isinstance(bounds, BoxBounds) else BoxBounds(bounds, dims=len(x0))
    if box.dims != len(x0):
        raise InvalidTypeError(f'Bounds cover {box.dims} dimensions but the starting point has {len(x0)}.')
    return x0, box, line_tolerance * LINE_STEP


def minimize_powell(func, x0, max_iter: int = 20, max_iter_line_search: int = 100, line_tolerance: float = None,
                    tolerance: float = 1e-8, bounds: list | BoxBounds = None, verbose: bool = False,
                    full_output: bool = False):
    """
    Minimize a function of several variables using Powell's direction set method, optionally within box bounds.

    Each iteration performs a line search along every direction in the current direction set, then replaces the oldest
    direction with the net displacement of the iteration and searches along it once more. Line searches are limited to
    the portion of each line that lies within the bounds.

    Parameters
    ----------
    func: callable
        Objective function taking a 1D numpy.ndarray and returning a float. Each call receives its own array.
    x0: sequence of float
        The starting point, moved inside the bounds before the search begins if it lies outside
    max_iter: int, optional
        Maximum number of outer iterations (default 20)
    max_iter_line_search: int, optional
        Maximum number of golden section iterations per line search (default 100)
    line_tolerance: float, optional
        Tolerance of each line search relative to the initial line step of 0.1, defaults to 'tolerance'
    tolerance: float, optional
        The search converges once the length of an iteration's final step falls below this fraction of the previous
        iteration's final step (default 1e-8)
    bounds: list of tuple or None or BoxBounds, optional
        Per-dimension (lower, upper) pairs, with None entries (or infinite values) for unbounded dimensions (sides)
    verbose: bool, optional
        If True, log the progress of each iteration at INFO level, requires one extra evaluation per iteration
    full_output: bool, optional
        If True, a PowellReport is returned alongside the final point (default False)

    Returns
    -------
    numpy.ndarray or None
        The point found, or None if a line search failed. Running out of iterations still returns the current point.
    PowellReport, optional
        Diagnostic record of the search, only returned if 'full_output' is True
    """
    x0, box, line_tol = _prepare(x0, max_iter, max_iter_line_search, line_tolerance, tolerance, bounds)
    report = PowellReport()
    p, report.evaluations = _drive(
        _powell(x0, box, max_iter, max_iter_line_search, line_tol, tolerance, verbose, report), func)
    return (p, report) if full_output else p


async def minimize_powell_async(func, x0, max_iter: int = 20, max_iter_line_search: int = 100,
                                line_tolerance: float = None, tolerance: float = 1e-8,
                                bounds: list | BoxBounds = None, verbose: bool = False, full_output: bool = False):
    """
    Awaitable variant of minimize_powell for objectives that return awaitables, such as coroutine functions or
    rate-limited remote evaluations. Evaluations are never issued concurrently, each one completes before the next.
    """
    x0, box, line_tol = _prepare(x0, max_iter, max_iter_line_search, line_tolerance, tolerance, bounds)
    report = PowellReport()
    p, report.evaluations = await _drive_async(
        _powell(x0, box, max_iter, max_iter_line_search, line_tol, tolerance, verbose, report), func)
    return (p, report) if full_output else p
