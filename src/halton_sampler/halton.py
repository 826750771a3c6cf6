"""
Halton sampler: one radical-inverse axis per prime base.
"""

from collections.abc import Sequence

import numpy as np

from halton_sampler.permutation import DigitPermutation, compute_digit_permutations
from halton_sampler.primes import PRIME_TABLE_SIZE, prime_for_dimension
from halton_sampler.radical_inverse import radical_inverse, scramble_radical_inverse
from halton_sampler.sampler import RandomStrategy

DEFAULT_INDEX = 1


class HaltonSampler:
    """
    Stateful Halton sampler.

    Dimension d of sample i is the radical inverse of i in base PRIMES[d],
    optionally scrambled with a per-base digit permutation. At most
    PRIME_TABLE_SIZE dimensions are available per sample.

    Parameters
    ----------
    strategy : RandomStrategy, optional
        Randomization strategy (default: RandomStrategy.NONE)
    seed : int, optional
        Seed for the digit permutations (default: 0, only used with
        RandomStrategy.PERMUTE_DIGITS)
    dtype : type, optional
        Floating type of drawn values, np.float32 or np.float64
        (default: np.float64)
    permutations : Sequence[DigitPermutation], optional
        Prebuilt permutations indexed by dimension, e.g. from
        `compute_digit_permutations`. When given, `seed` is ignored and the
        tables are shared rather than rebuilt.

    Examples
    --------
    >>> sampler = HaltonSampler()
    >>> sampler.set_i(1)
    >>> [float(v) for v in sampler.get2d()]
    [0.5, 0.3333333333333333]
    """

    def __init__(
        self,
        strategy: RandomStrategy = RandomStrategy.NONE,
        seed: int = 0,
        dtype=np.float64,
        permutations: Sequence[DigitPermutation] | None = None,
    ):
        if dtype not in (np.float32, np.float64):
            raise ValueError("dtype must be np.float32 or np.float64")

        self.index = DEFAULT_INDEX
        self.dim = 0
        self._strategy = RandomStrategy(strategy)
        self._seed = seed
        self._dtype = dtype

        if self._strategy is RandomStrategy.PERMUTE_DIGITS:
            if permutations is None:
                permutations = compute_digit_permutations(seed)
            self._permuters = tuple(permutations)
            for i, perm in enumerate(self._permuters):
                if perm.base != prime_for_dimension(i):
                    raise ValueError(
                        f"permutation for dimension {i} has base {perm.base}, "
                        f"expected {prime_for_dimension(i)}"
                    )
        else:
            self._permuters = None

    @classmethod
    def plain(cls, dtype=np.float64) -> "HaltonSampler":
        """Create an unrandomized sampler."""
        return cls(RandomStrategy.NONE, dtype=dtype)

    @classmethod
    def randomized(cls, seed: int = 0, dtype=np.float64) -> "HaltonSampler":
        """Create a sampler scrambled with per-base digit permutations."""
        return cls(RandomStrategy.PERMUTE_DIGITS, seed=seed, dtype=dtype)

    @property
    def strategy(self) -> RandomStrategy:
        return self._strategy

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def dtype(self):
        return self._dtype

    @property
    def permuters(self) -> tuple[DigitPermutation, ...] | None:
        return self._permuters

    def restore(self) -> None:
        self.dim = 0
        self.index = DEFAULT_INDEX

    def set_i(self, i: int) -> None:
        self.index = i

    def set_dim(self, dim: int) -> None:
        self.dim = dim

    def get1d(self):
        value = self.sample_dimension(self.index, self.dim)
        self.dim += 1
        return value

    def get2d(self) -> tuple:
        # Cursor only moves once both draws succeeded
        v1 = self.sample_dimension(self.index, self.dim)
        v2 = self.sample_dimension(self.index, self.dim + 1)
        self.dim += 2
        return v1, v2

    def sample_dimension(self, a: int, dim: int):
        """
        Value of dimension `dim` for sample index `a`, without touching the cursor.

        Parameters
        ----------
        a : int
            Sample index
        dim : int
            Dimension in [0, PRIME_TABLE_SIZE)

        Returns
        -------
        dtype
            Value in [0, 1)
        """
        if dim < 0 or dim >= PRIME_TABLE_SIZE:
            raise ValueError(
                f"dimension must be in [0, {PRIME_TABLE_SIZE}), got {dim}"
            )

        if self._strategy is RandomStrategy.PERMUTE_DIGITS:
            if self._permuters is None or dim >= len(self._permuters):
                raise RuntimeError(f"no digit permutation for dimension {dim}")
            return scramble_radical_inverse(a, dim, self._permuters[dim], dtype=self._dtype)
        return radical_inverse(a, dim, dtype=self._dtype)

    def __repr__(self) -> str:
        return (
            f"HaltonSampler(strategy={self._strategy.name}, index={self.index}, "
            f"dim={self.dim}, dtype={np.dtype(self._dtype).name})"
        )


def halton_sequence(
    n_points: int,
    dimension: int,
    start: int = DEFAULT_INDEX,
    sampler: HaltonSampler | None = None,
) -> np.ndarray:
    """
    Generate consecutive Halton points.

    Parameters
    ----------
    n_points : int
        Number of points to generate
    dimension : int
        Number of dimensions per point (1 to PRIME_TABLE_SIZE)
    start : int, optional
        Sample index of the first point (default: 1, which skips the origin)
    sampler : HaltonSampler, optional
        Sampler to draw from (default: a new unrandomized sampler). Its cursor
        and index are left at the last point drawn.

    Returns
    -------
    np.ndarray
        Array of shape (n_points, dimension); row j is sample index start + j
    """
    if n_points <= 0:
        raise ValueError("n_points must be positive")
    if dimension < 1 or dimension > PRIME_TABLE_SIZE:
        raise ValueError(f"dimension must be between 1 and {PRIME_TABLE_SIZE}")
    if start < 0:
        raise ValueError("start must be non-negative")

    if sampler is None:
        sampler = HaltonSampler()

    points = np.zeros((n_points, dimension), dtype=sampler.dtype)
    for j in range(n_points):
        sampler.set_i(start + j)
        sampler.set_dim(0)
        for d in range(dimension):
            points[j, d] = sampler.get1d()

    return points
