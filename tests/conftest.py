from __future__ import annotations

import numpy as np
import pytest

from tests.numba_layers import NUMBA_TEST_CACHE, NUMBA_TEST_LAYER, reset_nbxsort_numba_cache


def pytest_report_header() -> str:
    """Show active numba testing mode in pytest output."""
    return f"NUMBA_TEST_LAYER={NUMBA_TEST_LAYER}, NUMBA_TEST_CACHE={'true' if NUMBA_TEST_CACHE else 'false'}"


@pytest.fixture(scope="session", autouse=True)
def maybe_reset_numba_cache() -> None:
    """Optionally clear dispatcher caches once per test session."""
    if NUMBA_TEST_CACHE:
        reset_nbxsort_numba_cache()


@pytest.fixture
def int_cases() -> list[np.ndarray]:
    """Small int64 inputs covering the boundary shapes every sort must handle."""
    rs = np.random.default_rng(7)
    return [
        np.array([], dtype=np.int64),
        np.array([5], dtype=np.int64),
        np.array([2, 1], dtype=np.int64),
        np.array([3, 1, 3, 2, 3], dtype=np.int64),
        np.arange(13, dtype=np.int64),
        np.arange(13, dtype=np.int64)[::-1].copy(),
        np.full(9, 4, dtype=np.int64),
        rs.integers(0, 1000, size=257).astype(np.int64),
        rs.integers(0, 12, size=100).astype(np.int64),
    ]
