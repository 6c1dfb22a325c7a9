# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Custom complex data types/classes used in the powellmin package."""

from . import bounds, reports, benchmarks
from .bounds import *
from .reports import *
from .benchmarks import *

__all__ = list(bounds.__all__)
__all__ += reports.__all__
__all__ += benchmarks.__all__
