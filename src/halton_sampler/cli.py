#!/usr/bin/env python
"""
Command-line interface for generating Halton sample points.

Example usage:
    halton-sample --n_points 16 --dimension 2
    halton-sample --n_points 1024 --dimension 3 --randomize --seed 7 --pfm coverage.pfm
"""

import argparse

import numpy as np

from halton_sampler.halton import HaltonSampler, halton_sequence
from halton_sampler.pfm import PFMImage
from halton_sampler.primes import PRIME_TABLE_SIZE, PRIMES
from halton_sampler.sampler import RandomStrategy

_DTYPES = {"float32": np.float32, "float64": np.float64}


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Halton low-discrepancy sample generator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Sequence parameters
    parser.add_argument("--n_points", type=int, default=16, help="Number of points")
    parser.add_argument("--dimension", type=int, default=2, help="Dimensions per point")
    parser.add_argument(
        "--start",
        type=int,
        default=1,
        help="Sample index of the first point",
    )
    parser.add_argument(
        "--dtype",
        type=str,
        choices=sorted(_DTYPES),
        default="float64",
        help="Floating precision of the samples",
    )

    # Randomization
    parser.add_argument(
        "--randomize",
        action="store_true",
        help="Scramble the sequence with per-base digit permutations",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for the digit permutations (with --randomize)",
    )

    # Output
    parser.add_argument(
        "--pfm",
        type=str,
        default=None,
        help="Write a grayscale PFM coverage image of the first two dimensions",
    )
    parser.add_argument(
        "--resolution",
        type=int,
        default=64,
        help="Width and height of the coverage image",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the individual points",
    )

    return parser.parse_args(args)


def coverage_image(points: np.ndarray, resolution: int) -> PFMImage:
    """
    Bin the first two coordinates of `points` into a grayscale image.

    Each pixel holds its point count divided by the count expected from a
    perfectly uniform distribution, so an even covering is close to 1.
    """
    img = PFMImage.create_image(1, resolution, resolution)
    weight = resolution * resolution / len(points)
    for u, v in points[:, :2]:
        count = img.get_color(u, v)[0]
        img.set_color((count + weight,), u, v)
    return img


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for errors).
    """
    parsed = parse_args(args)

    if parsed.n_points <= 0:
        print("Error: --n_points must be positive")
        return 1
    if parsed.dimension < 1 or parsed.dimension > PRIME_TABLE_SIZE:
        print(f"Error: --dimension must be between 1 and {PRIME_TABLE_SIZE}")
        return 1
    if parsed.start < 0:
        print("Error: --start must be non-negative")
        return 1
    if parsed.seed < 0:
        print("Error: --seed must be non-negative")
        return 1
    if parsed.pfm is not None:
        if parsed.dimension < 2:
            print("Error: --pfm requires --dimension of at least 2")
            return 1
        if parsed.resolution <= 0:
            print("Error: --resolution must be positive")
            return 1

    strategy = RandomStrategy.PERMUTE_DIGITS if parsed.randomize else RandomStrategy.NONE
    sampler = HaltonSampler(strategy, seed=parsed.seed, dtype=_DTYPES[parsed.dtype])

    print("=" * 70)
    print("Halton Sample Generator")
    print("=" * 70)
    print(f"  Points:                 {parsed.n_points:,}")
    print(f"  Dimensions:             {parsed.dimension}")
    bases = ", ".join(str(p) for p in PRIMES[: min(parsed.dimension, 8)])
    if parsed.dimension > 8:
        bases += ", ..."
    print(f"  Bases:                  {bases}")
    print(f"  First Sample Index:     {parsed.start}")
    print(f"  Precision:              {parsed.dtype}")
    print(f"  Randomization:          {strategy.name}")
    if parsed.randomize:
        print(f"  Seed:                   {parsed.seed}")

    points = halton_sequence(parsed.n_points, parsed.dimension, start=parsed.start, sampler=sampler)

    if not parsed.quiet:
        print("\n" + "-" * 70)
        for j, row in enumerate(points):
            values = " ".join(f"{float(x):.8f}" for x in row)
            print(f"{parsed.start + j:>8}  {values}")
        print("-" * 70)

    print("\nPer-dimension mean (expected 0.5):")
    for d, mean in enumerate(points.mean(axis=0)[: min(parsed.dimension, 8)]):
        print(f"  dim {d:<3} base {int(PRIMES[d]):<5} {float(mean):.6f}")

    if parsed.pfm is not None:
        img = coverage_image(points, parsed.resolution)
        img.save_to(parsed.pfm)
        print(f"\nCoverage image written to {parsed.pfm} "
              f"({parsed.resolution}x{parsed.resolution})")

    print("\n" + "=" * 70)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
