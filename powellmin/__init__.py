# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""
powellmin Derivative-Free Minimizer (module powellmin)

Description
-----------
The powellmin module finds local minima of scalar functions of one or several real variables without requiring any
derivative information, optionally subject to independent lower and upper bounds on each variable. It is intended for
objectives that are cheap to write but awkward to differentiate, such as simulation outputs, noisy measurements, or
quantities obtained from remote services.

Two minimizers are provided. The one-dimensional minimizer first brackets a minimum by stepping outwards from a guess
at an accelerating rate, then narrows the bracket using golden section search. The multivariate minimizer implements
Powell's direction set method, performing a sequence of such one-dimensional searches along a set of directions that is
updated each iteration with the net progress made. Box bounds are honoured by limiting each line search to the part of
the line that lies within the bounds.

Failures are reported through return values rather than exceptions: the one-dimensional minimizer returns nan when the
function has no bracketed minimum (e.g., it decreases without limit) and the multivariate minimizer returns None when
any of its line searches fails. Running out of iterations is not a failure, the best point found is still returned.
Passing 'full_output=True' to the minimizers additionally returns a report with diagnostic information such as the
number of function evaluations and the full sequence of visited points.

Objectives that must be awaited (e.g., coroutine functions) are supported through the '_async' variants of the
minimizers, which issue evaluations strictly one after another.

A cookbook of classic benchmark functions with known minima is included for experimentation and testing.

Core Interface
---------
minimize_powell - Multivariate minimization using Powell's method with optional box bounds
minimize_golden_section_1d - One-dimensional minimization with optional interval bounds
BoxBounds - Class representing per-dimension lower and upper bounds
PowellReport, LineSearchReport - Diagnostic records returned when 'full_output' is requested
"""

# This value determines the project version for PyPi as well
__version__ = '0.1.0'

from . import models
from . import cookbook
from .models import *
from .cookbook import *
from .math import bracket_minimum, golden_section_minimize, minimize_golden_section_1d, \
    minimize_golden_section_1d_async
from .optim import minimize_powell, minimize_powell_async
from .helpers import configure_logger

__all__ = ['minimize_powell', 'minimize_powell_async', 'minimize_golden_section_1d',
           'minimize_golden_section_1d_async', 'golden_section_minimize', 'bracket_minimum', 'configure_logger',
           'models', 'cookbook']
__all__.extend(models.__all__)
__all__.extend(cookbook.__all__)
