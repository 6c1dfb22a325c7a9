# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Custom classes for reporting the progress and outcome of powellmin minimizations"""

from __future__ import annotations

import json
import numpy as np
import pandas as pd
from pathlib import Path

from powellmin.helpers import logger

__all__ = ['LineSearchReport', 'PowellReport']


class LineSearchReport:
    """
    Diagnostic record of a one-dimensional minimization. Purely observational, the algorithms never read it back.

    Attributes
    ----------
    iterations: int
        The number of golden section iterations performed
    argmin: float
        The location of the minimum that was reported, nan if no minimum could be found
    minimum: float
        The function value at the reported minimum (an average of the final probe values for interior estimates)
    converged: bool
        Whether the search interval shrank below the tolerance before the iteration budget ran out
    evaluations: int
        The total number of function evaluations, including those made while bracketing
    """
    def __init__(self):
        self.iterations = 0
        self.argmin = np.nan
        self.minimum = np.inf
        self.converged = False
        self.evaluations = 0

    def __repr__(self):
        return f'LineSearchReport(iterations={self.iterations}, argmin={self.argmin}, minimum={self.minimum}, ' \
               f'converged={self.converged}, evaluations={self.evaluations})'


class PowellReport:
    """
    Class for structuring the diagnostic information collected during a Powell minimization

    Attributes
    ----------
    points: list of numpy.ndarray
        Every point the search moved to, starting with the (bounds clamped) initial point
    iterations: int
        The number of outer iterations started
    evaluations: int
        The total number of objective function evaluations made
    converged: bool
        Whether the search stopped because one of the convergence conditions was met
    message: str
        Short description of why the search stopped
    """

    def __init__(self):
        self.points = []
        self.iterations = 0
        self.evaluations = 0
        self.converged = False
        self.message = ''

    def add_point(self, point: np.ndarray):
        """
        Record a visited point, stored as a copy so later in-place updates of the search point do not alter history

        Parameters
        ----------
        point: numpy.ndarray
            The point the search just moved to
        """
        self.points.append(np.array(point, dtype=float))

    def visited(self) -> pd.DataFrame:
        """
        Tabulate the visited points, one row per point in the order they were visited.

        Returns
        -------
        pandas.DataFrame
            Columns 'x0' through 'x{n-1}' for an n-dimensional search, indexed by 'step #'
        """
        dims = len(self.points[0]) if self.points else 0
        table = pd.DataFrame(np.reshape(np.array(self.points, dtype=float), (len(self.points), dims)),
                             columns=[f'x{i}' for i in range(dims)])
        table.index.name = 'step #'
        return table

    def export_to_json(self, file: str = None) -> dict:
        """
        Formats the report as a json compatible dictionary so that it can be saved as a file for storage or sharing

        Parameters
        ----------
        file: str, optional
            The path and file (absolute or relative to CWD) to save the report to, if not provided only the dictionary
            is returned

        Returns
        -------
        dict
            The JSON dictionary format for the report
        """
        if not self.points:
            logger.warning('Exporting a Powell report that has no visited points.')
        report_json = {
            'Converged': self.converged,
            'Message': self.message,
            'Iterations': self.iterations,
            'Evaluations': self.evaluations,
            'Visited': self.visited().to_json(),
        }
        if file:
            # Make the directory if it doesn't yet exist, otherwise the file open will fail
            Path(file).parent.mkdir(parents=True, exist_ok=True)
            with open(file, 'w') as f:
                json.dump(report_json, f)
            logger.info(f'Successfully exported Powell report to file {file}.')
        return report_json

    def __repr__(self):
        return f'PowellReport(converged={self.converged}, message={self.message!r}, iterations={self.iterations}, ' \
               f'evaluations={self.evaluations}, points={len(self.points)})'
