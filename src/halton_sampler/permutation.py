"""
Digit permutations for scrambling radical inverses.

A permutation of {0, ..., base - 1} is drawn for every digit position of the
expansion, so a scrambled sequence stays a (0, 1)-stratified point set while
decorrelating the dimensions of a Halton sampler.
"""

import numpy as np

from halton_sampler.primes import PRIME_TABLE_SIZE, PRIMES


def digit_count(base: int) -> int:
    """
    Number of base-`base` digits a scrambled radical inverse consumes.

    Counts iterations of the loop `while 1 - (base - 1) * b^-m < 1` in double
    precision, i.e. the digits still visible in a float64 result.

    Parameters
    ----------
    base : int
        Digit base (must be >= 2)

    Returns
    -------
    int
        Number of digit positions
    """
    if base < 2:
        raise ValueError("base must be at least 2")
    inv_base = 1.0 / base
    inv_base_m = 1.0
    n_digits = 0
    while 1.0 - (base - 1) * inv_base_m < 1.0:
        inv_base_m *= inv_base
        n_digits += 1
    return n_digits


class DigitPermutation:
    """
    Seeded per-position permutation of the digits of one base.

    Parameters
    ----------
    base : int
        Digit base (must be >= 2)
    seed : int, optional
        Non-negative seed (default: 0). The same (base, seed) pair always
        builds the same tables.

    Notes
    -----
    Row k of `permutations` is applied to the digit at expansion position k.
    There are `n_digits` rows, enough for a double-precision scrambled
    radical inverse; positions past the last row wrap around modulo
    `n_digits`.
    """

    def __init__(self, base: int, seed: int = 0):
        if seed < 0:
            raise ValueError("seed must be non-negative")

        self.base = int(base)
        self.seed = int(seed)
        self.n_digits = digit_count(self.base)

        rng = np.random.default_rng([self.seed, self.base])
        identity = np.tile(
            np.arange(self.base, dtype=np.min_scalar_type(self.base - 1)), (self.n_digits, 1)
        )
        self._permutations = rng.permuted(identity, axis=1)
        self._permutations.flags.writeable = False

    @property
    def permutations(self) -> np.ndarray:
        """Read-only table of shape (n_digits, base)."""
        return self._permutations

    def permute(self, digit_index: int, digit_value: int) -> int:
        """
        Map a digit through the permutation of its expansion position.

        Parameters
        ----------
        digit_index : int
            Position of the digit in the expansion (0 = least significant
            digit of the sample index)
        digit_value : int
            Raw digit in [0, base)

        Returns
        -------
        int
            Permuted digit in [0, base)
        """
        return int(self._permutations[digit_index % self.n_digits, digit_value])

    def __repr__(self) -> str:
        return f"DigitPermutation(base={self.base}, seed={self.seed}, n_digits={self.n_digits})"


def compute_digit_permutations(
    seed: int = 0, n_bases: int = PRIME_TABLE_SIZE
) -> tuple[DigitPermutation, ...]:
    """
    Build one digit permutation per prime base.

    The tables are read-only, so the returned tuple can be handed to several
    samplers.

    Parameters
    ----------
    seed : int, optional
        Seed shared by all bases (default: 0)
    n_bases : int, optional
        Number of leading primes to cover (default: PRIME_TABLE_SIZE)

    Returns
    -------
    tuple[DigitPermutation, ...]
        Permutation for PRIMES[i] at position i
    """
    if n_bases < 0 or n_bases > PRIME_TABLE_SIZE:
        raise ValueError(f"n_bases must be in [0, {PRIME_TABLE_SIZE}]")
    return tuple(DigitPermutation(int(p), seed) for p in PRIMES[:n_bases])
