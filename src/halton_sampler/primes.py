"""
Prime table used to assign one Halton base per sample dimension.

Dimension 0 uses base 2, dimension 1 uses base 3, and so on.
"""

import numpy as np

PRIME_TABLE_SIZE = 1000

# The 1000th prime is 7919
_SIEVE_LIMIT = 7920


def _first_primes(count: int, limit: int) -> np.ndarray:
    """Return the first `count` primes below `limit` via a sieve of Eratosthenes."""
    is_prime = np.ones(limit, dtype=bool)
    is_prime[:2] = False
    for p in range(2, int(limit**0.5) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = False
    primes = np.flatnonzero(is_prime)[:count].astype(np.int64)
    if len(primes) != count:
        raise ValueError(f"sieve limit {limit} yields fewer than {count} primes")
    return primes


PRIMES = _first_primes(PRIME_TABLE_SIZE, _SIEVE_LIMIT)
PRIMES.flags.writeable = False


def prime_for_dimension(base_index: int) -> int:
    """
    Resolve the prime base used by a dimension.

    Parameters
    ----------
    base_index : int
        Dimension index in [0, PRIME_TABLE_SIZE)

    Returns
    -------
    int
        The (base_index + 1)-th prime
    """
    if base_index < 0 or base_index >= PRIME_TABLE_SIZE:
        raise ValueError(f"base_index must be in [0, {PRIME_TABLE_SIZE}), got {base_index}")
    return int(PRIMES[base_index])
