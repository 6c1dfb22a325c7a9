# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Derivative-free one-dimensional minimization algorithms leveraged by the powellmin package."""

from .bracket import bracket_minimum
from .golden_section import golden_section_minimize
from .minimize import minimize_golden_section_1d, minimize_golden_section_1d_async

__all__ = ['bracket_minimum', 'golden_section_minimize', 'minimize_golden_section_1d',
           'minimize_golden_section_1d_async']
