from __future__ import annotations

import os
from typing import Any, Callable

import numba as nb
import numba.core.errors as nb_error
import numpy as np
from numba import types
from numba.extending import overload, register_jitable


# This only changes once at import time.
# --- Numba Global Fastmath : integer kernels are unaffected, but float callers of the shared helpers are.
_fm = os.environ.get("NB_GLOB_FM", "true")
_fm = bool(_fm) and _fm.lower() not in ("false", "0")
# --- Numba Global Error Model : 'numpy'|'python', 'numpy' does fewer checks and usually gives faster jitted code.
_erm = os.environ.get("NB_GLOB_EM", "numpy")


"""
Some notes on this section:

## Configurations
s : Sync, every kernel here is single threaded.
c : Cache the compilation for new signatures.
i : Manual/forced Numba-IR level inline. Used for the comparison and key helpers so they compile into the kernel's
scope.

## Decorators
jt - Numba jit using the base defaults and extension characters seen above.
rg - Register Jittable, these functions will compile into the Numba IR but run as python when called from the
interpreter. You can call a jitted function's python body by `jitfunc.py_func(*args, **kwargs)`.
ov - Overload decorators. See the numba docs for coverage on this.
"""

_dft = dict(fastmath=_fm, error_model=_erm)  # base python arguments.
jit_s = _dft
jit_sc = jit_s | dict(cache=True)
jit_si = jit_s | dict(inline="always")
jit_sci = jit_si | dict(cache=True)

# --- JIT DECORATORS
jt = nb.njit(**jit_s)  # plain jit
jtc = nb.njit(**jit_sc)  # cache
jtic = nb.njit(**jit_sci)  # inline and cache

# --- REGISTER JITTABLE DECORATORS
_rg = register_jitable
rgi = _rg(**jit_si)  # Inline


# --- OVERLOADS DECORATORS
def ovsi(impl: Callable[..., Any]) -> Callable[..., Any]: return overload(impl, jit_options=jit_s, inline="always")


@jtic
def placerange(r: np.ndarray, start: int = 0, step: int = 1) -> None:
    """
    Like numpy arange but for existing arrays.

    :param r: Output array.
    :param start: Starting value.
    :param step: Step value.
    :returns: None.
    """
    for i in range(r.shape[0]): r[i] = start + i * step


@rgi
def swap(x: np.ndarray, i: int, j: int) -> None:
    """Array element swap shorthand.

    :param x: 1D array to perform element swap on.
    :param i: First element index.
    :param j: Second element index.
    :returns: None.
    """
    t = x[i]
    x[i] = x[j]
    x[j] = t


def run_py(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Numba's base python definition is inside the ``py_func`` field, if it exists we try to call it here.

    :param func: callable.
    :param args: Variable unnamed ordered args.
    :param kwargs: Variable named unordered kwargs.
    :returns: The function result.
    """
    if hasattr(func, "py_func"): func = func.py_func

    return func(*args, **kwargs)


def run_numba(func: Callable[..., Any], *args: Any, verbose: bool = False, **kwargs: Any) -> Any:
    """
    First attempts to call the numba dispatcher in fully compiled (no-python) mode.

    If that fails it tries to run as a python function. Even if the function signature isn't
    supported in no-python mode, the inner kernels it calls will still be compiled separately.

    :param func: callable.
    :param args: Variable unnamed ordered args.
    :param verbose: Announce if the no-python dispatch failed for the
        function before running in python mode.
    :param kwargs: Variable named unordered kwargs.
    :returns: The function result.
    """
    try:
        return func(*args, **kwargs)
    except (nb_error.TypingError, nb_error.UnsupportedError):
        if verbose: print(f"Failed to run full-numba for {func.__name__}, attempting in python.")
        return run_py(func, *args, **kwargs)
