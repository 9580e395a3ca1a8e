from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Callable

import numpy as np

import nbxsort.sort as sorti
import nbxsort.utils as nbu


_I64 = np.iinfo(np.int64)


class InvalidInputError(ValueError):
    """Raised when a sorter is given something other than a 1D sequence of integers it can sort."""


def as_int_array(items: Sequence[int] | np.ndarray) -> np.ndarray:
    """
    Copy ``items`` into a fresh 1D int64 array, the buffer every sorter works on.

    :param items: Sequence or array of integers, may be empty.
    :returns: A new int64 array, never a view of ``items``.
    """
    arr = np.asarray(items)
    if arr.ndim != 1: raise InvalidInputError(f"expected a 1D sequence of integers, got {arr.ndim} dimensions")
    if arr.size == 0: return np.empty(0, dtype=np.int64)
    if arr.dtype.kind not in "iu":
        raise InvalidInputError(f"expected integers in the int64 range [{_I64.min}, {_I64.max}], got dtype {arr.dtype}")
    # unsigned values past the int64 max would wrap negative in the cast
    if arr.dtype.kind == "u" and int(arr.max()) > _I64.max:
        raise InvalidInputError(f"values must fit the int64 range [{_I64.min}, {_I64.max}], got {int(arr.max())}")
    return np.array(arr, dtype=np.int64)


class Sorter:
    """
    Stateless sort capability, ``sort(items)`` returns a new ascending array with the same values as ``items``.

    Subclasses bind one algorithm through ``_kernel`` (direct sort) and ``_arg_kernel`` (index sort). The only
    instance state is the ``jit`` switch, set once at construction.

    :param jit: If False, run the python body of the entry kernel (``py_func``), the inner kernels it calls stay
        compiled.
    :param verbose: Announce when a compiled kernel falls back to python.
    """

    name: str = ""
    stable: bool = False
    _kernel: Callable[..., None]
    _arg_kernel: Callable[..., None]

    def __init__(self, jit: bool = True, verbose: bool = False) -> None:
        self.jit = jit
        self.verbose = verbose

    def __repr__(self) -> str:
        return f"{type(self).__name__}(jit={self.jit})"

    def _run(self, kernel: Callable[..., None], *args: Any) -> None:
        if self.jit: nbu.run_numba(kernel, *args, verbose=self.verbose)
        else: nbu.run_py(kernel, *args)

    def _check(self, sr: np.ndarray) -> None:
        pass

    def sort(self, items: Sequence[int] | np.ndarray) -> np.ndarray:
        """
        Sort a copy of ``items``; the caller's sequence is left untouched.

        :param items: Integers to sort, may be empty or hold duplicates.
        :returns: New int64 array in non-decreasing order.
        """
        sr = as_int_array(items)
        self._check(sr)
        self._run(type(self)._kernel, sr)
        return sr

    def argsort(self, items: Sequence[int] | np.ndarray) -> np.ndarray:
        """
        Index permutation that sorts ``items``, ``items[idx]`` is non-decreasing.

        For stable sorters equal values keep their original relative order, so their indexes stay ascending.

        :param items: Integers to rank.
        :returns: int64 index array.
        """
        sr = as_int_array(items)
        self._check(sr)
        idxr = np.empty(sr.size, dtype=np.int64)
        nbu.placerange(idxr)
        self._run(type(self)._arg_kernel, sr, idxr)
        return idxr


class BubbleSort(Sorter):
    name = "bubble"
    stable = True
    _kernel = sorti.bubble_sort
    _arg_kernel = sorti.arg_bubble_sort


class SelectSort(Sorter):
    name = "select"
    _kernel = sorti.select_sort
    _arg_kernel = sorti.arg_select_sort


class InsertSort(Sorter):
    name = "insert"
    stable = True
    _kernel = sorti.insert_sort
    _arg_kernel = sorti.arg_insert_sort


class ShellSort(Sorter):
    name = "shell"
    _kernel = sorti.shell_sort
    _arg_kernel = sorti.arg_shell_sort


class HeapSort(Sorter):
    name = "heap"
    _kernel = sorti.heap_sort
    _arg_kernel = sorti.arg_heap_sort


class MergeSort(Sorter):
    """Bottom-up merge sort. Ties are taken from the left run, so it is stable."""

    name = "merge"
    stable = True
    _kernel = sorti.merge_sort
    _arg_kernel = sorti.arg_merge_sort


class QuickSort(Sorter):
    name = "quick"
    _kernel = sorti.quick_sort
    _arg_kernel = sorti.arg_quick_sort


class RadixSort(Sorter):
    """Decimal LSD radix sort, non-negative integers only."""

    name = "radix"
    stable = True
    _kernel = sorti.radix_sort
    _arg_kernel = sorti.arg_radix_sort

    def _check(self, sr: np.ndarray) -> None:
        if sr.size and sr.min() < 0:
            raise InvalidInputError(f"radix sort requires non-negative integers, got {int(sr.min())}")


class SortType(Enum):
    """Closed set of sort algorithm identifiers."""

    BUBBLE = "bubble"
    SELECT = "select"
    INSERT = "insert"
    SHELL = "shell"
    HEAP = "heap"
    MERGE = "merge"
    QUICK = "quick"
    RADIX = "radix"

    @property
    def label(self) -> str:
        """Display name used in benchmark output, e.g. ``"Bubble sort"``."""
        return _LABELS[self]

    def create(self, jit: bool = True, verbose: bool = False) -> Sorter:
        return _SORTERS[self](jit=jit, verbose=verbose)


_LABELS: dict[SortType, str] = {
    SortType.BUBBLE: "Bubble sort",
    SortType.SELECT: "Selection sort",
    SortType.INSERT: "Insertion sort",
    SortType.SHELL: "Shell sort",
    SortType.HEAP: "Heap sort",
    SortType.MERGE: "Merge sort",
    SortType.QUICK: "Quick sort",
    SortType.RADIX: "Radix sort",
}


_SORTERS: dict[SortType, type[Sorter]] = {
    SortType.BUBBLE: BubbleSort,
    SortType.SELECT: SelectSort,
    SortType.INSERT: InsertSort,
    SortType.SHELL: ShellSort,
    SortType.HEAP: HeapSort,
    SortType.MERGE: MergeSort,
    SortType.QUICK: QuickSort,
    SortType.RADIX: RadixSort,
}


def create_sorter(sort_type: SortType | str, jit: bool = True, verbose: bool = False) -> Sorter:
    """
    Build the sorter for an algorithm identifier.

    :param sort_type: A ``SortType`` member or its value, e.g. ``"quick"``.
    :param jit: Forwarded to the sorter, False runs the python kernels.
    :param verbose: Forwarded to the sorter.
    :returns: A new sorter instance.
    """
    return SortType(sort_type).create(jit=jit, verbose=verbose)
