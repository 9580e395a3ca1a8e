from __future__ import annotations

import numpy as np

import nbxsort
from tests.numba_layers import iter_function_layers, reset_nbxsort_numba_cache


def test_nbxsort_root_exports() -> None:
    """Validate root-level exports and module aliases in the public API."""
    for name in nbxsort.__all__:
        assert hasattr(nbxsort, name)
    assert nbxsort.sort.merge_sort is nbxsort.merge_sort
    assert issubclass(nbxsort.InvalidInputError, ValueError)


def test_public_kernels_reachable_from_root() -> None:
    values = np.array([3, -1, 7, 3, 0, -4], dtype=np.int64)
    for _, layer_fn in iter_function_layers(nbxsort.heap_sort):
        arr = values.copy()
        layer_fn(arr)
        np.testing.assert_array_equal(arr, np.sort(values))

    for _, layer_fn in iter_function_layers(nbxsort.arg_shell_sort):
        idx = np.arange(values.size, dtype=np.int64)
        layer_fn(values, idx)
        np.testing.assert_array_equal(values[idx], np.sort(values))


def test_dispatcher_cache_reset_then_recompile() -> None:
    nbxsort.insert_sort(np.array([2, 1], dtype=np.int64))
    assert isinstance(reset_nbxsort_numba_cache(), int)
    arr = np.array([2, 1], dtype=np.int64)
    nbxsort.insert_sort(arr)
    np.testing.assert_array_equal(arr, [1, 2])
