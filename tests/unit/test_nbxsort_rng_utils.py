from __future__ import annotations

import numpy as np

import nbxsort.rng as rng
import nbxsort.utils as nbu
from tests.numba_layers import iter_function_layers


def test_shuffled_range_is_a_seeded_permutation() -> None:
    a = rng.shuffled_range(200, seed=4)
    assert a.dtype == np.int64
    np.testing.assert_array_equal(np.sort(a), np.arange(200))
    np.testing.assert_array_equal(rng.shuffled_range(200, seed=4), a)
    assert not np.array_equal(a, np.arange(200))
    assert rng.shuffled_range(0, seed=1).size == 0


def test_partial_durstenfeld_shuffle_keeps_values() -> None:
    for _, layer_fn in iter_function_layers(rng.durstenfeld_p_shuffle):
        a = np.arange(50, dtype=np.int64)
        layer_fn(a, 10)
        np.testing.assert_array_equal(np.sort(a), np.arange(50))


def test_swap_and_placerange() -> None:
    x = np.array([1, 2, 3], dtype=np.int64)
    nbu.swap(x, 0, 2)
    np.testing.assert_array_equal(x, [3, 2, 1])

    r = np.empty(4, dtype=np.int64)
    nbu.placerange(r, 2, 3)
    np.testing.assert_array_equal(r, [2, 5, 8, 11])


def test_run_py_and_run_numba_dispatch(capsys) -> None:
    arr = np.array([3, 1, 2], dtype=np.int64)
    nbu.run_py(nbu.placerange, arr)
    np.testing.assert_array_equal(arr, [0, 1, 2])
    assert nbu.run_py(lambda a, b=1: a + b, 2, b=5) == 7

    nbu.run_numba(nbu.placerange, arr, 10, verbose=True)
    np.testing.assert_array_equal(arr, [10, 11, 12])
    assert capsys.readouterr().out == ""
