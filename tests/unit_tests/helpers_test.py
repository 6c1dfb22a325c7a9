# Copyright (c) 2024 Ian Hill
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the helper functions within powellmin"""

import asyncio
import pytest

from powellmin.helpers import _drive, _drive_async, _remap_requests, _on_demand_import


def requester(xs):
    """Simple evaluation-requesting generator, asks for each value in turn and returns the results."""
    results = []
    for x in xs:
        fx = yield x
        results.append(fx)
    return results


def test_drive():
    result, evals = _drive(requester([1, 2, 3]), lambda x: x * 10)
    assert result == [10, 20, 30]
    assert evals == 3

    # A generator that never asks for anything still finishes cleanly
    result, evals = _drive(requester([]), lambda x: x * 10)
    assert result == []
    assert evals == 0


def test_drive_propagates_objective_errors():
    def broken(x):
        raise ValueError('objective failed')

    with pytest.raises(ValueError):
        _drive(requester([1]), broken)


def test_drive_async():
    async def remote(x):
        await asyncio.sleep(0)
        return x - 1

    result, evals = asyncio.run(_drive_async(requester([5, 6]), remote))
    assert result == [4, 5]
    assert evals == 2
    # Plain values are passed straight through as well
    result, evals = asyncio.run(_drive_async(requester([5, 6]), lambda x: x + 1))
    assert result == [6, 7]


def test_remap_requests():
    seen = []

    def objective(x):
        seen.append(x)
        return -x

    remapped = _remap_requests(requester([1, 2]), lambda t: 100 + t)
    result, evals = _drive(remapped, objective)
    # The objective sees the transformed requests, the inner generator receives the values unchanged
    assert seen == [101, 102]
    assert result == [-101, -102]
    assert evals == 2


def test_on_demand_import():
    math_mod = _on_demand_import('math')
    assert math_mod.sqrt(4) == 2

    missing = _on_demand_import('not_a_real_module_name', 'not-a-real-package')
    with pytest.raises(ImportError) as err:
        missing.anything()
    assert 'not-a-real-package' in str(err.value)
