# Copyright (c) 2023 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Helper functions and fixtures to streamline testing of the minimizers."""

import pytest
import numpy as np


def vec_close(computed, expected, tol: float = 1e-6) -> bool:
    """Check that a minimizer result exists, has the expected length, and matches the expected point coordinate-wise."""
    if computed is None:
        return False
    computed, expected = np.asarray(computed, dtype=float), np.asarray(expected, dtype=float)
    return computed.shape == expected.shape and bool(np.all(np.abs(computed - expected) < tol))


@pytest.fixture
def assert_vec_close():
    def check(computed, expected, tol: float = 1e-6):
        assert vec_close(computed, expected, tol), f'Expected {expected} (to within {tol}), got {computed}'
    return check


@pytest.fixture
def seeded_rng():
    # Reproducible noise source for testing robustness to noisy objectives
    return np.random.default_rng(seed=2024)
