from __future__ import annotations

from . import rng, sort, utils
from .sort import (
    arg_bubble_sort,
    arg_heap_sort,
    arg_insert_sort,
    arg_merge_sort,
    arg_quick_sort,
    arg_radix_sort,
    arg_select_sort,
    arg_shell_sort,
    bubble_sort,
    heap_sort,
    insert_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    select_sort,
    shell_sort,
)
from .sorter import (
    BubbleSort,
    HeapSort,
    InsertSort,
    InvalidInputError,
    MergeSort,
    QuickSort,
    RadixSort,
    SelectSort,
    ShellSort,
    Sorter,
    SortType,
    create_sorter,
)

__all__ = [
    "rng",
    "sort",
    "utils",
    "arg_bubble_sort",
    "arg_heap_sort",
    "arg_insert_sort",
    "arg_merge_sort",
    "arg_quick_sort",
    "arg_radix_sort",
    "arg_select_sort",
    "arg_shell_sort",
    "bubble_sort",
    "heap_sort",
    "insert_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "select_sort",
    "shell_sort",
    "BubbleSort",
    "HeapSort",
    "InsertSort",
    "InvalidInputError",
    "MergeSort",
    "QuickSort",
    "RadixSort",
    "SelectSort",
    "ShellSort",
    "Sorter",
    "SortType",
    "create_sorter",
]
