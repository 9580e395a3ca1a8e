from __future__ import annotations

import time as t
from collections.abc import Sequence

import numpy as np

from nbxsort.rng import shuffled_range
from nbxsort.sorter import Sorter, SortType


def time_sorts(sorters: Sequence[Sorter],
               names: Sequence[str],
               items: np.ndarray,
               compile_size=16,
               repeat_sequence=10,
               settle=0.25,
               verbose=True) -> np.ndarray:
    """
    Time each sorter on its own copy of ``items``.

    Every sorter is first run on a small slice so the numba compile time stays out of the measurements, then the
    timing passes run in order and in reverse order, since the order of execution can shift timings.

    :param sorters: Sorters to time.
    :param names: Display name per sorter.
    :param items: Shared input, each call sorts a private copy.
    :param compile_size: Length of the warmup slice.
    :param repeat_sequence: Number of timed calls per sorter, rounded down to an even count.
    :param settle: Seconds to sleep after compilation.
    :param verbose: Print per sorter totals.
    :returns: ``(len(sorters), repeats)`` array of elapsed seconds.
    """
    rep1 = max(repeat_sequence // 2, 1)
    rep2 = rep1 * 2
    times = np.zeros((len(sorters), rep2), dtype=np.float64)

    run_seq = (*enumerate(sorters),)
    rrun_seq = run_seq[::-1]

    # compile run
    ct = t.perf_counter()
    for s in sorters: s.sort(items[:compile_size])
    if verbose: print(f"All compiled in: {(t.perf_counter() - ct):.3f} seconds.")

    # wait for system resources to calm down after compilation.
    if settle: t.sleep(settle)
    ttc = t.perf_counter()
    for v in range(rep1):
        for i, s in run_seq:
            ct = t.perf_counter()
            s.sort(items)
            times[i, v] = t.perf_counter() - ct

    # Reverse timing run
    for v in range(rep1, rep2):
        for i, s in rrun_seq:
            ct = t.perf_counter()
            s.sort(items)
            times[i, v] = t.perf_counter() - ct
    fct = t.perf_counter() - ttc

    if verbose:
        plist = [f"Ran {len(sorters)} sorters for {rep2} iterations in {fct:.3f} seconds."]
        plist.extend(f"{n} elapsed: {times[i].mean():.6f} seconds (mean of {rep2})." for i, n in enumerate(names))
        print("\n".join(plist))
    return times


def summarize(times: np.ndarray, confidence=0.99) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Per sorter statistics of a ``time_sorts`` result.

    :param times: ``(n_sorters, n_samples)`` timings, ``n_samples >= 2``.
    :param confidence: Two sided confidence level of the interval.
    :returns: ``(means, medians, stds, ci_half)``, ``ci_half`` is the t-distribution half width of the mean.
    """
    # scipy only comes with the bench and test extras
    from scipy.stats import t as tdist  # for t-distribution critical value

    n_samples = times.shape[1]
    df = n_samples - 1
    means = times.mean(axis=1)
    medians = np.median(times, axis=1)
    stds = times.std(axis=1, ddof=1)  # sample standard deviation
    t_val = tdist.ppf(0.5 + confidence / 2, df=df)
    ci_half = t_val * (stds / np.sqrt(n_samples))
    return means, medians, stds, ci_half


def sort_benchmark(n=1000, seed=None, repeat_sequence=10, jit=True, verbose=True) -> tuple[np.ndarray, list[str]]:
    """
    Time every ``SortType`` on one shuffled permutation of ``0..n-1``.

    :param n: Input length.
    :param seed: Seed for the shuffle.
    :param repeat_sequence: Timed calls per sorter.
    :param jit: Forwarded to every sorter.
    :param verbose: Print the timings.
    :returns: ``(times, names)``, names are the ``SortType`` labels.
    """
    items = shuffled_range(n, seed)
    names = [st.label for st in SortType]
    sorters = [st.create(jit=jit) for st in SortType]
    if verbose: print(f"sort_size={n}, repeat_sequence={repeat_sequence}")
    times = time_sorts(sorters, names, items, repeat_sequence=repeat_sequence, verbose=verbose)
    return times, names
