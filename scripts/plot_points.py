#!/usr/bin/env python
"""
Scatter plots of plain and scrambled Halton points against pseudo-random points.

Saves halton_points.png next to the current working directory.
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from halton_sampler.halton import HaltonSampler, halton_sequence
from halton_sampler.permutation import compute_digit_permutations
from halton_sampler.sampler import RandomStrategy


def main():
    """Plot the first 512 points of three 2D point sets."""
    n_points = 512
    # High dimensions show the correlation that scrambling removes
    dims = (30, 31)

    rng = np.random.default_rng(0)
    plain = halton_sequence(n_points, max(dims) + 1)[:, dims]
    scrambled_sampler = HaltonSampler(
        RandomStrategy.PERMUTE_DIGITS,
        permutations=compute_digit_permutations(0, n_bases=max(dims) + 1),
    )
    scrambled = halton_sequence(n_points, max(dims) + 1, sampler=scrambled_sampler)[:, dims]

    panels = [
        ("Pseudo-random", rng.random((n_points, 2))),
        (f"Halton dims {dims}", plain),
        (f"Scrambled Halton dims {dims}", scrambled),
    ]

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, (title, points) in zip(axes, panels):
        ax.scatter(points[:, 0], points[:, 1], s=4)
        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1)
        ax.set_aspect("equal")
        ax.set_title(title)

    plt.tight_layout()
    output_path = Path("halton_points.png")
    plt.savefig(output_path, dpi=150)
    print(f"Plot saved to {output_path}")


if __name__ == "__main__":
    main()
