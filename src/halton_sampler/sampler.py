"""
Sampler interface shared by all low-discrepancy samplers.
"""

from enum import Enum
from typing import Protocol


class RandomStrategy(Enum):
    """Randomization applied to a sampler's sequence, fixed at construction."""

    NONE = "none"
    PERMUTE_DIGITS = "permute_digits"


class Sampler(Protocol):
    """
    Protocol for stateful samplers driven by a sample index and a dimension cursor.

    A caller sets the sample index once per sample with `set_i`, then draws
    values; every draw consumes the dimension under the cursor and advances it.
    """

    def restore(self) -> None:
        """Reset the dimension cursor to 0 and the sample index to 1."""
        ...

    def set_i(self, i: int) -> None:
        """Set the current sample index."""
        ...

    def set_dim(self, dim: int) -> None:
        """Move the dimension cursor to `dim`."""
        ...

    def get1d(self):
        """Draw one value in [0, 1) and advance the cursor by one."""
        ...

    def get2d(self) -> tuple:
        """Draw values for dimensions d and d + 1 and advance the cursor by two."""
        ...
