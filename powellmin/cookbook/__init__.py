# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""
This submodule provides classic optimization test functions as prebuilt benchmarks to aid users in quickly checking
minimizer behaviour without having to write out the objectives themselves.
"""

from . import benchmark_fns
from .benchmark_fns import *

__all__ = list(benchmark_fns.__all__)
