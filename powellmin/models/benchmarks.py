# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Benchmark objective functions with known minima for exercising and comparing minimizers"""

from __future__ import annotations

from typing import Callable
import numpy as np

from powellmin.exceptions import UserConfigError

__all__ = ['Benchmark']


class Benchmark:
    """
    An objective function bundled with the location of its global minimum and a suggested search setup.

    Attributes
    ----------
    name: str
        Descriptive name of the benchmark
    func: Callable
        The objective, takes a 1D array-like point and returns a float
    minimizers: numpy.ndarray
        The known global minimum locations, one per row (some functions have several)
    start: numpy.ndarray
        A suggested starting point for minimization
    bounds: list of tuple or None
        A suggested per-dimension search region, None if the benchmark is meant to be searched unbounded
    """
    def __init__(self, func: Callable, minimizer, start, bounds: list = None, name: str = None):
        """
        Parameters
        ----------
        func: Callable
            The objective, takes a 1D array-like point and returns a float
        minimizer: array-like
            The global minimum location, or a 2D array-like of locations if there are several equivalent minima
        start: array-like
            A suggested starting point for minimization
        bounds: list of tuple, optional
            A suggested per-dimension search region (default None, i.e., unbounded)
        name: str, optional
            Descriptive name of the benchmark, defaults to the name of the function
        """
        self.func = func
        self.name = name if name else func.__name__
        self.minimizers = np.atleast_2d(np.array(minimizer, dtype=float))
        self.start = np.array(start, dtype=float)
        if self.minimizers.shape[1] != len(self.start):
            raise UserConfigError(f"Benchmark '{self.name}' minimizer and starting point dimensions do not match.")
        self.bounds = bounds

    @property
    def dims(self) -> int:
        return len(self.start)

    @property
    def minimizer(self) -> np.ndarray:
        """The first (or only) known minimum location."""
        return self.minimizers[0]

    def __call__(self, x) -> float:
        return self.func(x)

    def is_solution(self, x, tol: float = 1e-6) -> bool:
        """
        Check whether a point lies within a tolerance of any of the known minima in every coordinate

        Parameters
        ----------
        x: array-like or None
            The candidate point, None (a failed minimization) is never a solution
        tol: float, optional
            Maximum allowed absolute deviation per coordinate (default 1e-6)

        Returns
        -------
        bool
            True if the candidate matches one of the known minima
        """
        if x is None:
            return False
        x = np.asarray(x, dtype=float)
        return bool(np.any(np.all(np.abs(self.minimizers - x) <= tol, axis=1)))

    def __repr__(self):
        return f"Benchmark('{self.name}', dims={self.dims})"
