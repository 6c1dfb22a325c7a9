# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Axis-aligned box constraints on the search space"""

from __future__ import annotations

import numpy as np

from powellmin.exceptions import UserConfigError

__all__ = ['BoxBounds']


class BoxBounds:
    """
    Independent lower and upper limits for each dimension of a search space. Open sides are stored as -inf and inf.

    Attributes
    ----------
    lower: numpy.ndarray
        Per-dimension lower limits, -inf where a dimension has no lower limit
    upper: numpy.ndarray
        Per-dimension upper limits, inf where a dimension has no upper limit
    """
    def __init__(self, bounds: list = None, dims: int = None):
        """
        Parameters
        ----------
        bounds: list of tuple or None, optional
            One entry per dimension, either a (lower, upper) pair or None for an unbounded dimension. Missing trailing
            entries are treated as unbounded. None means the whole space is unbounded.
        dims: int, optional
            The dimensionality of the search space, defaults to the number of bound entries
        """
        bounds = [] if bounds is None else list(bounds)
        dims = len(bounds) if dims is None else dims
        if len(bounds) > dims:
            raise UserConfigError(f'Received {len(bounds)} bound entries for a {dims} dimensional search space.')

        self.lower = np.full(dims, -np.inf)
        self.upper = np.full(dims, np.inf)
        for i, pair in enumerate(bounds):
            if pair is None:
                continue
            lo, hi = pair
            lo = -np.inf if lo is None else float(lo)
            hi = np.inf if hi is None else float(hi)
            if lo > hi:
                raise UserConfigError(f'Lower bound {lo} exceeds upper bound {hi} for dimension {i}.')
            self.lower[i], self.upper[i] = lo, hi

    @property
    def dims(self) -> int:
        return len(self.lower)

    @property
    def active(self) -> bool:
        """True if at least one dimension has a finite limit."""
        return bool(np.any(np.isfinite(self.lower)) or np.any(np.isfinite(self.upper)))

    def clamp(self, point: np.ndarray) -> np.ndarray:
        """Return a copy of the point with every coordinate moved inside its limits."""
        return np.minimum(np.maximum(np.asarray(point, dtype=float), self.lower), self.upper)

    def contains(self, point: np.ndarray) -> bool:
        point = np.asarray(point, dtype=float)
        return bool(np.all(point >= self.lower) and np.all(point <= self.upper))

    def step_limits(self, point: np.ndarray, direction: np.ndarray) -> tuple[float, float]:
        """
        Intersect the line through 'point' along 'direction' with the box.

        Parameters
        ----------
        point: numpy.ndarray
            The origin of the line, expected to lie within the box
        direction: numpy.ndarray
            The direction of the line, need not be normalized

        Returns
        -------
        tuple of float
            The smallest and largest step lengths t for which point + t * direction stays within the box, infinite
            where the line never leaves the box on that side
        """
        t_min, t_max = -np.inf, np.inf
        for j in np.flatnonzero(direction):
            # Stepping towards negative coordinates swaps which limit bounds the step from which side
            if direction[j] > 0:
                to_lower, to_upper = self.lower[j], self.upper[j]
            else:
                to_lower, to_upper = self.upper[j], self.lower[j]
            if np.isfinite(to_lower):
                t_min = max(t_min, (to_lower - point[j]) / direction[j])
            if np.isfinite(to_upper):
                t_max = min(t_max, (to_upper - point[j]) / direction[j])
        return float(t_min), float(t_max)

    def __repr__(self):
        return f'BoxBounds({list(zip(self.lower.tolist(), self.upper.tolist()))})'
