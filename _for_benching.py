import math as mt

import matplotlib.pyplot as plt
import numpy as np

from nbxsort.bench import summarize


def plot_times(times, names, confidence=0.99):
    ### mean, median and confidence intervals for comparison of each sorter on a bar chart.
    means, medians, _, ci_half = summarize(times, confidence)

    bcolor = 'darkgrey'

    # Make a wider/shorter figure with fully transparent background
    fig = plt.figure(figsize=(12, 3.25))
    fig.patch.set_alpha(0)  # Transparent figure background
    ax = plt.gca()
    ax.set_facecolor('none')  # Transparent axes background
    ax.tick_params(colors=bcolor, labelsize=14)
    for side in ('bottom', 'left', 'top', 'right'): ax.spines[side].set_color(bcolor)

    x_positions = np.linspace((ov := .5 / mt.sqrt(len(names))), 1. - ov, len(names))
    plt.xlim(0.0, 1.)  # Add margin so points don't hit the corners

    plt.errorbar(
        x_positions, means, yerr=ci_half,
        fmt='o', color='blue', ecolor=bcolor, elinewidth=1.5, capsize=5,
        label=f'Mean ± {confidence:.0%} CI'
    )
    plt.scatter(
        x_positions, medians,
        marker='D', color='red', zorder=3,
        label='Median'
    )

    plt.xticks(x_positions, names, rotation=20, fontsize=14, color=bcolor)

    # sorters span orders of magnitude, a log axis keeps the fast ones readable.
    plt.yscale('log')
    plt.ylabel("Execution Time (seconds)", color=bcolor, fontsize=14)
    plt.title(f"Sort Timing ({confidence:.0%} CI via t-dist)", color=bcolor, fontsize=16)
    plt.legend(facecolor='none', edgecolor=bcolor, fontsize=12, labelcolor=bcolor)
    plt.tight_layout()
    plt.show()
