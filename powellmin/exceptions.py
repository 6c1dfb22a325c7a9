# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Custom exceptions and error handling types for powellmin"""

__all__ = [
    'UserConfigError',
    'InvalidTypeError',
]


class UserConfigError(Exception):
    """Error raised when user specified options are missing, incorrectly formatted, or otherwise unsuitable."""


class InvalidTypeError(Exception):
    """Error raised when an input has the wrong type or shape for the requested operation."""
