from nbxsort.bench import sort_benchmark

from _for_benching import plot_times


def sorts_benchmark(n=1000, seed=None, repeat_sequence=10, plot=True):
    times, names = sort_benchmark(n, seed=seed, repeat_sequence=repeat_sequence)
    if plot: plot_times(times, names)
    return times, names


def sorts_python_vs_jit_benchmark(n=300, seed=None):
    # py_func entries still call compiled inner kernels, so this mostly shows dispatch overhead.
    for jit in (True, False):
        print(f'--- jit={jit}')
        sort_benchmark(n, seed=seed, repeat_sequence=4, jit=jit)


if __name__ == '__main__':
    sorts_benchmark()
