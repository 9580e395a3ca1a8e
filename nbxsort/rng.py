from __future__ import annotations

import random as rand

import numpy as np

import nbxsort.utils as nbu


@nbu.jt
def durstenfeld_p_shuffle(a: np.ndarray, k: int | None = None) -> None:
    """
    Perform up to k swaps of the Durstenfeld shuffle on array 'a'.
    Shuffling should still be unbiased even if a isn't changed back to sorted.

    :param a: Array to shuffle in-place.
    :param k: Number of swaps (defaults to ``a.shape[0] - 1``).
    :returns: None.
    """
    n = a.shape[0]
    num_swaps = n - 1 if k is None else k
    for i in range(num_swaps):
        j = rand.randrange(i, n)
        nbu.swap(a, i, j)


@nbu.jtc
def _ss(f) -> None:
    rand.seed(f)
    np.random.seed(f)


def set_seed(seed: int | None) -> None:
    """
    Set both ``random`` and ``numpy.random`` seeds for both python and jit execution, from a python scope.

    Numba keeps its own generator state, so seeding from python alone would not make jitted shuffles repeatable.

    :param seed: Seed value, None leaves every generator as it is.
    :returns: None.
    """
    if seed is not None:
        _ss(seed)
        rand.seed(seed)
        np.random.seed(seed)


def shuffled_range(n: int, seed: int | None = None) -> np.ndarray:
    """
    A shuffled permutation of ``0..n-1``, the standard benchmark input.

    :param n: Number of values.
    :param seed: Optional seed, the same seed gives the same permutation.
    :returns: int64 array of length ``n``.
    """
    a = np.empty(n, dtype=np.int64)
    nbu.placerange(a)
    set_seed(seed)
    durstenfeld_p_shuffle(a)
    return a
