"""
Halton Sampler

Deterministic low-discrepancy sample sequences for Monte Carlo estimators.
"""

from halton_sampler._version import __version__

# Core components
from halton_sampler.halton import HaltonSampler, halton_sequence
from halton_sampler.permutation import DigitPermutation, compute_digit_permutations
from halton_sampler.primes import PRIME_TABLE_SIZE, PRIMES
from halton_sampler.radical_inverse import (
    ONE_MINUS_EPSILON,
    radical_inverse,
    scramble_radical_inverse,
)
from halton_sampler.sampler import RandomStrategy, Sampler

# Raster I/O
from halton_sampler.pfm import PFMImage

__all__ = [
    "__version__",
    # Tables
    "PRIMES",
    "PRIME_TABLE_SIZE",
    "ONE_MINUS_EPSILON",
    # Radical inverse
    "radical_inverse",
    "scramble_radical_inverse",
    "DigitPermutation",
    "compute_digit_permutations",
    # Samplers
    "Sampler",
    "RandomStrategy",
    "HaltonSampler",
    "halton_sequence",
    # Raster I/O
    "PFMImage",
]
