"""
Radical inverse functions for Van der Corput / Halton sequences.

The radical inverse of an integer a in base b mirrors the base-b digits of a
around the radix point:

    a = d_m ... d_2 d_1  (base b)  ->  0.d_1 d_2 ... d_m  (base b)

Both functions accept a floating `dtype` (np.float32 or np.float64); all
arithmetic is carried out in that precision and the result is clamped to
the largest value below 1 so the half-open range [0, 1) always holds.
"""

from typing import Protocol

import numpy as np

from halton_sampler.primes import prime_for_dimension


def one_minus_epsilon(dtype=np.float64):
    """Largest value strictly below 1 representable in `dtype`."""
    one = dtype(1)
    return np.nextafter(one, dtype(0))


ONE_MINUS_EPSILON = one_minus_epsilon(np.float64)


class DigitPermuter(Protocol):
    """Anything that maps (digit position, digit value) to a digit value."""

    def permute(self, digit_index: int, digit_value: int) -> int:
        ...


def radical_inverse(a: int, base_index: int, dtype=np.float64):
    """
    Compute the radical inverse of `a` in base PRIMES[base_index].

    Parameters
    ----------
    a : int
        Sample index (must be >= 0)
    base_index : int
        Index into the prime table, in [0, PRIME_TABLE_SIZE)
    dtype : type, optional
        Floating type of the result (default: np.float64)

    Returns
    -------
    dtype
        Value in [0, 1)

    Examples
    --------
    >>> float(radical_inverse(3, 0))
    0.75
    """
    base = prime_for_dimension(base_index)
    a = int(a)
    if a < 0:
        raise ValueError("sample index a must be non-negative")

    inv_base = dtype(1) / dtype(base)
    inv_base_m = dtype(1)
    rev_digits = 0
    while a != 0:
        next_a = a // base
        digit = a - next_a * base
        rev_digits = rev_digits * base + digit
        inv_base_m = inv_base_m * inv_base
        a = next_a

    # rev_digits / b^m
    inv = dtype(rev_digits) * inv_base_m
    return np.minimum(inv, one_minus_epsilon(dtype))


def scramble_radical_inverse(a: int, base_index: int, perm: DigitPermuter, dtype=np.float64):
    """
    Compute the digit-permuted radical inverse of `a` in base PRIMES[base_index].

    Every digit, including the implicit zero digits past the most significant
    digit of `a`, is passed through `perm.permute(position, digit)`. Digits
    are consumed until a further digit could no longer change the result in
    `dtype`, i.e. while 1 - (b - 1) * b^-m < 1.

    Parameters
    ----------
    a : int
        Sample index (must be >= 0)
    base_index : int
        Index into the prime table, in [0, PRIME_TABLE_SIZE)
    perm : DigitPermuter
        Digit permutation for this base
    dtype : type, optional
        Floating type of the result (default: np.float64)

    Returns
    -------
    dtype
        Value in [0, 1)
    """
    base = prime_for_dimension(base_index)
    a = int(a)
    if a < 0:
        raise ValueError("sample index a must be non-negative")

    one = dtype(1)
    max_digit = dtype(base - 1)
    inv_base = one / dtype(base)
    inv_base_m = one
    rev_digits = 0
    digit_index = 0
    while one - max_digit * inv_base_m < one:
        next_a = a // base
        digit = a - next_a * base
        rev_digits = rev_digits * base + perm.permute(digit_index, digit)
        inv_base_m = inv_base_m * inv_base
        digit_index += 1
        a = next_a

    inv = dtype(rev_digits) * inv_base_m
    return np.minimum(inv, one_minus_epsilon(dtype))
