"""Random sampling primitives used by every generator.

Wraps a NumPy random generator so that generators never touch the
randomness source directly. Injecting a generator built from a fixed seed
makes a whole briefing reproducible.
"""

import math
from typing import List, Optional, Sequence, TypeVar

import numpy as np

from takecmd.core.errors import EmptyPool, InsufficientPool, InvalidRange

T = TypeVar("T")


class Sampler:
    """Draws values from pools and ranges.

    Attributes:
        rng: NumPy random generator consumed by every draw.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "Sampler":
        """Create a sampler over a fresh generator.

        Args:
            seed: Seed for reproducible draws. None uses OS entropy.
        """
        return cls(np.random.default_rng(seed))

    def uniform_int(self, min_value: int, max_value: int) -> int:
        """Uniform integer in [min_value, max_value], both inclusive."""
        if min_value > max_value:
            raise InvalidRange(f"min ({min_value}) is greater than max ({max_value})")
        return int(self.rng.integers(min_value, max_value, endpoint=True))

    def uniform_float(self, min_value: float, max_value: float, decimals: int) -> float:
        """Uniform decimal in [min_value, max_value] with fixed precision.

        Samples over the values representable with ``decimals`` places, so
        the result never rounds outside the interval.

        Args:
            min_value: Lower bound (inclusive).
            max_value: Upper bound (inclusive).
            decimals: Number of decimal places kept.

        Returns:
            Float rounded to ``decimals`` places.

        Raises:
            InvalidRange: If min > max, or no value with that precision
                fits inside the interval.
        """
        if min_value > max_value:
            raise InvalidRange(f"min ({min_value}) is greater than max ({max_value})")
        if decimals < 0:
            raise InvalidRange(f"decimals must be non-negative, got {decimals}")

        scale = 10 ** decimals
        # Round before ceil/floor so 0.1 * 100 == 10.000000000000002 stays 10
        low = math.ceil(round(min_value * scale, 6))
        high = math.floor(round(max_value * scale, 6))
        if low > high:
            raise InvalidRange(
                f"no {decimals}-decimal value lies in [{min_value}, {max_value}]"
            )
        units = int(self.rng.integers(low, high, endpoint=True))
        return round(units / scale, decimals)

    def weighted_bool(self, percent_true: float) -> bool:
        """True with probability percent_true / 100."""
        if not 0 <= percent_true <= 100:
            raise InvalidRange(f"percent_true must be in [0, 100], got {percent_true}")
        return bool(self.rng.random() < percent_true / 100.0)

    def coin_flip(self) -> bool:
        """Unweighted boolean."""
        return self.weighted_bool(50)

    def pick_one(self, pool: Sequence[T]) -> T:
        """Pick a single element uniformly."""
        items = list(pool)
        if not items:
            raise EmptyPool("cannot pick from an empty pool")
        # Index-based choice keeps the element type intact
        return items[int(self.rng.integers(len(items)))]

    def pick_set(self, pool: Sequence[T], count: int) -> List[T]:
        """Pick ``count`` distinct elements without replacement.

        Raises:
            InvalidRange: If count is negative.
            InsufficientPool: If count exceeds the pool size.
        """
        items = list(pool)
        if count < 0:
            raise InvalidRange(f"count must be non-negative, got {count}")
        if count > len(items):
            raise InsufficientPool(
                f"requested {count} distinct values from a pool of {len(items)}"
            )
        indices = self.rng.choice(len(items), size=count, replace=False)
        return [items[i] for i in indices]
