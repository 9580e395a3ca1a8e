from __future__ import annotations

import importlib
import os
import pkgutil
from collections.abc import Callable, Iterator
from typing import Any

import pytest
from numba.core.registry import CPUDispatcher

import nbxsort

_LAYER_RAW = (os.getenv("NUMBA_TEST_LAYER") or "all").strip().lower()
if _LAYER_RAW in {"python", "py"}:
    NUMBA_TEST_LAYER = "py"
elif _LAYER_RAW in {"jit", "numba"}:
    NUMBA_TEST_LAYER = "jit"
else:
    NUMBA_TEST_LAYER = "all"

NUMBA_TEST_CACHE = (os.getenv("NUMBA_TEST_CACHE") or "false").strip().lower() == "true"

RUN_PY = NUMBA_TEST_LAYER in {"all", "py"}
RUN_JIT = NUMBA_TEST_LAYER in {"all", "jit"}


def iter_function_layers(func: Callable[..., Any]) -> Iterator[tuple[str, Callable[..., Any]]]:
    """Yield ``(layer, callable)`` for the python body and the compiled dispatcher of a kernel.

    The python layer runs ``py_func`` of the entry kernel only, anything it calls is still the compiled dispatcher.
    Plain python callables are yielded once.
    """
    if not hasattr(func, "py_func"):
        yield "py", func
        return
    if RUN_PY: yield "py", func.py_func
    if RUN_JIT: yield "jit", func


def layer_params(*funcs: Callable[..., Any]) -> list[Any]:
    """``pytest.param`` per active layer of each kernel, with readable ids like ``bubble_sort-jit``."""
    return [
        pytest.param(fn, id=f"{getattr(f, '__name__', 'func')}-{layer}")
        for f in funcs
        for layer, fn in iter_function_layers(f)
    ]


def _iter_nbxsort_modules() -> Iterator[Any]:
    yield nbxsort
    for mod_info in pkgutil.walk_packages(nbxsort.__path__, prefix=f"{nbxsort.__name__}."):
        yield importlib.import_module(mod_info.name)


def reset_nbxsort_numba_cache() -> int:
    """Reset numba dispatcher in-memory caches for nbxsort modules, returns how many were cleared."""
    count = 0
    for module in _iter_nbxsort_modules():
        for obj in vars(module).values():
            if isinstance(obj, CPUDispatcher) and callable(clear := getattr(obj, "_clear", None)):
                clear()
                count += 1
    return count
