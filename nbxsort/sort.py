from __future__ import annotations

import numpy as np

import nbxsort.utils as nbu

MArray = np.ndarray | None
_N = nbu.types.none

"""
Every kernel is written once as ``impl_<name>_sort(cr, vals, ...)`` and sorts ``cr`` in-place.

- Direct sort: ``vals`` is None and ``cr`` is the value array.
- Index sort: ``cr`` holds indexes into ``vals`` and is permuted until ``vals[cr]`` is ascending.

Because ``vals`` is hardcoded as None or an array by the public entries, the comparison overloads below resolve at
compile time and the unused path is never compiled.
"""


def _lessthan(a, b, vals) -> bool:
    return vals[a] < vals[b] if vals is not None else a < b


@nbu.ovsi(_lessthan)
def _lessthan_(a, b, vals):  # pragma: no cover
    if vals is None or vals is _N: return lambda a, b, vals: a < b
    return lambda a, b, vals: vals[a] < vals[b]


def _key(a, vals):
    return vals[a] if vals is not None else a


@nbu.ovsi(_key)
def _key_(a, vals):  # pragma: no cover
    if vals is None or vals is _N: return lambda a, vals: a
    return lambda a, vals: vals[a]


### Bubble
@nbu.jt
def impl_bubble_sort(cr: np.ndarray, vals: MArray) -> None:
    n = cr.shape[0]
    for i in range(n):
        # the smallest remaining value bubbles down to position i
        for j in range(n - 1, i, -1):
            if _lessthan(cr[j], cr[j - 1], vals): nbu.swap(cr, j - 1, j)


@nbu.jt
def bubble_sort(sr: np.ndarray) -> None:
    """
    Bubble sort, O(n^2), stable.

    :param sr: Array to sort in-place.
    :returns: None.
    """
    impl_bubble_sort(sr, None)


@nbu.jt
def arg_bubble_sort(sr: np.ndarray, idxr: np.ndarray) -> None:
    """
    Bubble based index sort.

    :param sr: Array for sort comparison.
    :param idxr: Array of sr indexes to sort.
    :returns: None.
    """
    impl_bubble_sort(idxr, sr)


### Select
@nbu.jt
def impl_select_sort(cr: np.ndarray, vals: MArray) -> None:
    n = cr.shape[0]
    for i in range(n):
        mi = i
        for j in range(i + 1, n):
            if _lessthan(cr[j], cr[mi], vals): mi = j
        if mi != i: nbu.swap(cr, i, mi)


@nbu.jt
def select_sort(sr: np.ndarray) -> None:
    """
    Selection sort, O(n^2). Not stable, the swap can carry an element past its equals.

    :param sr: Array to sort in-place.
    :returns: None.
    """
    impl_select_sort(sr, None)


@nbu.jt
def arg_select_sort(sr: np.ndarray, idxr: np.ndarray) -> None:
    impl_select_sort(idxr, sr)


### Insert
@nbu.jt
def impl_insert_sort(cr: np.ndarray, vals: MArray) -> None:
    for i in range(1, cr.shape[0]):
        k = cr[i]
        j = i
        while j > 0 and _lessthan(k, cr[j - 1], vals):
            # Make place for moving A[i] downwards
            cr[j] = cr[j - 1]
            j -= 1
        cr[j] = k


@nbu.jt
def insert_sort(sr: np.ndarray) -> None:
    """
    Insertion sort, O(n^2) worst case and O(n) on nearly sorted input, stable.

    (Shifting the prefix and writing the held value once had the best performance for Numba ``njit`` compilation,
    the result is the same as repeated adjacent swaps.)

    :param sr: Array to sort in-place.
    :returns: None.
    """
    impl_insert_sort(sr, None)


@nbu.jt
def arg_insert_sort(sr: np.ndarray, idxr: np.ndarray) -> None:
    """
    Insertion based index sort.

    :param sr: Array for sort comparison.
    :param idxr: Array of sr indexes to sort.
    :returns: None.
    """
    impl_insert_sort(idxr, sr)


### Shell
@nbu.jt
def impl_shell_sort(cr: np.ndarray, vals: MArray) -> None:
    n = cr.shape[0]
    gap = n // 2
    while gap > 0:
        # gapped insertion
        for i in range(gap, n):
            j = i
            while j >= gap and _lessthan(cr[j], cr[j - gap], vals):
                nbu.swap(cr, j - gap, j)
                j -= gap
        gap //= 2


@nbu.jt
def shell_sort(sr: np.ndarray) -> None:
    """
    Shell sort with the halving gap sequence n/2, n/4, ... 1. Not stable.

    :param sr: Array to sort in-place.
    :returns: None.
    """
    impl_shell_sort(sr, None)


@nbu.jt
def arg_shell_sort(sr: np.ndarray, idxr: np.ndarray) -> None:
    impl_shell_sort(idxr, sr)


### Heap
@nbu.jt
def _sift_down(cr: np.ndarray, vals: MArray, start: int, bound: int) -> None:
    # 1-based heap positions: node p sits at cr[p - 1], its children are 2p and 2p + 1.
    k = cr[start - 1]
    parent = start
    child = 2 * parent
    while child <= bound:
        if child < bound and _lessthan(cr[child - 1], cr[child], vals): child += 1
        if not _lessthan(k, cr[child - 1], vals): break
        cr[parent - 1] = cr[child - 1]
        parent = child
        child = 2 * parent
    cr[parent - 1] = k


@nbu.jt
def impl_heap_sort(cr: np.ndarray, vals: MArray) -> None:
    n = cr.shape[0]
    # build the max-heap from the last parent up to the root
    for p in range(n // 2, 0, -1): _sift_down(cr, vals, p, n)
    # move the root behind the shrinking heap bound
    for bound in range(n - 1, 0, -1):
        nbu.swap(cr, 0, bound)
        _sift_down(cr, vals, 1, bound)


@nbu.jt
def heap_sort(sr: np.ndarray) -> None:
    """
    Heap sort, O(n log n) with no extra memory. Not stable.

    The array is first arranged as a binary max-heap (every parent >= its children), then the root is repeatedly
    swapped with the last element of the heap, the heap bound is shrunk by one and the new root is sifted down.

    :param sr: Array to sort in-place.
    :returns: None.
    """
    impl_heap_sort(sr, None)


@nbu.jt
def arg_heap_sort(sr: np.ndarray, idxr: np.ndarray) -> None:
    impl_heap_sort(idxr, sr)


### Merge
@nbu.jt
def impl_merge_sort(cr: np.ndarray, vals: MArray, ws: np.ndarray) -> None:
    n = cr.shape[0]
    width = 1
    while width < n:
        # merge adjacent run pairs, an odd trailing run is carried to the next pass as is.
        for start in range(0, n - width, 2 * width):
            mid = start + width
            end = min(mid + width, n)

            # Copy the left run into the workspace so we don't overwrite it
            for v in range(width): ws[v] = cr[start + v]

            i = 0  # index for ws (left run)
            j = mid  # index for right run in cr
            k = start  # output index in cr
            while i < width and j < end:
                # ties take the left run, keeps equal values in their original order.
                if not _lessthan(cr[j], ws[i], vals):
                    cr[k] = ws[i]
                    i += 1
                else:
                    cr[k] = cr[j]
                    j += 1
                k += 1

            # Leftovers of the left run, the right run's leftovers are already in place.
            while i < width:
                cr[k] = ws[i]
                i += 1
                k += 1
        width *= 2


@nbu.jt
def merge_sort(sr: np.ndarray, ws: MArray = None) -> None:
    """
    Bottom-up merge sort, stable.

    Starts from runs of length one and merges adjacent pairs until a single run is left. If no workspace is
    provided, one is allocated with size ``sr.size``.

    :param sr: Array to sort in-place.
    :param ws: Optional workspace array, at least ``sr.size`` long.
    :returns: None.
    """
    if ws is None: ws = np.empty(sr.size, dtype=sr.dtype)
    impl_merge_sort(sr, None, ws)


@nbu.jt
def arg_merge_sort(sr: np.ndarray, idxr: np.ndarray, ws: MArray = None) -> None:
    """
    Bottom-up merge argsort.

    :param sr: Array used for sort comparison.
    :param idxr: Index array to sort in-place.
    :param ws: Optional workspace array, at least ``idxr.size`` long.
    :returns: None.
    """
    if ws is None: ws = np.empty(idxr.size, dtype=idxr.dtype)
    impl_merge_sort(idxr, sr, ws)


### Quick
@nbu.jt
def _partition(cr: np.ndarray, vals: MArray, low: int, high: int) -> int:
    # pivot is the first element of the subrange, the hole moves between the two cursors until they meet.
    k = cr[low]
    while low < high:
        while low < high and not _lessthan(cr[high], k, vals): high -= 1
        cr[low] = cr[high]
        while low < high and not _lessthan(k, cr[low], vals): low += 1
        cr[high] = cr[low]
    cr[low] = k
    return low


@nbu.jt
def impl_quick_sort(cr: np.ndarray, vals: MArray, low: int, high: int) -> None:
    while low < high:
        mid = _partition(cr, vals, low, high)
        # recurse into the smaller side only, so sorted input can't blow the stack.
        if mid - low < high - mid:
            impl_quick_sort(cr, vals, low, mid - 1)
            low = mid + 1
        else:
            impl_quick_sort(cr, vals, mid + 1, high)
            high = mid - 1


@nbu.jt
def quick_sort(sr: np.ndarray) -> None:
    """
    Quick sort with the first element of each subrange as pivot. Not stable.

    O(n log n) on average, O(n^2) on sorted or reverse sorted input, recursion depth stays O(log n).

    :param sr: Array to sort in-place.
    :returns: None.
    """
    impl_quick_sort(sr, None, 0, sr.shape[0] - 1)


@nbu.jt
def arg_quick_sort(sr: np.ndarray, idxr: np.ndarray) -> None:
    impl_quick_sort(idxr, sr, 0, idxr.shape[0] - 1)


### Radix
@nbu.jt
def impl_radix_sort(cr: np.ndarray, vals: MArray, ws: np.ndarray) -> None:
    n = cr.shape[0]
    if n == 0: return
    mx = _key(cr[0], vals)
    for i in range(n):
        v = _key(cr[i], vals)
        if v < 0: raise ValueError("radix sort requires non-negative integers")
        if v > mx: mx = v

    ndigits = 1
    while mx >= 10:
        mx //= 10
        ndigits += 1

    starts = np.zeros(10, dtype=np.int64)
    div = 1
    for _ in range(ndigits):
        starts[:] = 0
        for i in range(n): starts[(_key(cr[i], vals) // div) % 10] += 1
        # bucket b starts where buckets 0..b-1 end
        tot = 0
        for b in range(10):
            c = starts[b]
            starts[b] = tot
            tot += c
        # scanning left to right keeps each bucket in arrival order
        for i in range(n):
            d = (_key(cr[i], vals) // div) % 10
            ws[starts[d]] = cr[i]
            starts[d] += 1
        for i in range(n): cr[i] = ws[i]
        div *= 10


@nbu.jt
def radix_sort(sr: np.ndarray, ws: MArray = None) -> None:
    """
    LSD radix sort over decimal digits, stable.

    One pass per decimal digit of the largest value, each pass distributes the values into ten buckets by the
    current digit (digits past a value's own length count as 0) and reads them back in bucket order.

    Only defined for signed integer arrays with non-negative values, raises ``ValueError`` on a negative value.

    :param sr: Array to sort in-place.
    :param ws: Optional workspace array, at least ``sr.size`` long.
    :returns: None.
    """
    if ws is None: ws = np.empty(sr.size, dtype=sr.dtype)
    impl_radix_sort(sr, None, ws)


@nbu.jt
def arg_radix_sort(sr: np.ndarray, idxr: np.ndarray, ws: MArray = None) -> None:
    """
    Radix index sort, digits are taken from the ``sr`` values.

    :param sr: Array used for digit extraction, non-negative.
    :param idxr: Index array to sort in-place.
    :param ws: Optional workspace array, at least ``idxr.size`` long.
    :returns: None.
    """
    if ws is None: ws = np.empty(idxr.size, dtype=idxr.dtype)
    impl_radix_sort(idxr, sr, ws)
