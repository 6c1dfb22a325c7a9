# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""End-to-end checks that the minimizers remain usable on objectives corrupted by measurement noise"""

import math
import numpy as np
import pytest

from powellmin import minimize_powell, minimize_golden_section_1d


@pytest.mark.parametrize('noise', [1, 1e-3, 1e-5, 1e-8])
def test_powell_with_noise(noise, seeded_rng, assert_vec_close):
    def noisy_bowl(x):
        return (x[0] - 2) ** 2 + (x[1] + 3) ** 2 + seeded_rng.random() * noise

    # Noise of amplitude e limits the achievable precision to roughly sqrt(e)
    digits = -math.log10(noise) / 2 - 1
    x = minimize_powell(noisy_bowl, [0, 0], tolerance=noise, line_tolerance=noise, bounds=[(-10, 10), (-10, 10)],
                        verbose=True)
    assert_vec_close(x, [2, -3], 0.5 * 10 ** -digits)


@pytest.mark.parametrize('noise', [1e-4, 1e-8])
def test_1d_with_noise(noise, seeded_rng):
    def noisy_parabola(x):
        return (x - 0.7) ** 2 + seeded_rng.random() * noise

    x = minimize_golden_section_1d(noisy_parabola, tolerance=noise)
    assert x == pytest.approx(0.7, abs=10 * math.sqrt(noise))


def test_noisy_plateau_is_not_a_failure(seeded_rng):
    # Pure noise has no structure at all, but it is bounded so the search must still return a point in the box
    x, report = minimize_powell(lambda x: seeded_rng.random(), [0.2, -0.2], bounds=[(-1, 1), (-1, 1)], max_iter=5,
                                full_output=True)
    assert x is not None
    assert np.all(np.abs(x) <= 1)
    assert report.evaluations > 0
