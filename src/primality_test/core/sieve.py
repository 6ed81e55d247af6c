"""Least-prime-factor table built by a linear sieve.

Every composite below the bound is marked exactly once, by its least prime
factor, so construction is linear in the bound. The finished table is stored
in a read-only NumPy array and answers primality, factorization and
enumeration queries for ``0 <= value < len(sieve)``.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

import numpy as np

logger = logging.getLogger(__name__)

# Marker for entries that never receive a factor (0 and 1).
UNMARKED = np.iinfo(np.uint64).max


class LinearSieve:
    """Immutable least-prime-factor table over ``[0, length)``.

    ``table[i] == i`` iff ``i`` is prime; for composite ``i``, ``table[i]`` is
    the smallest prime dividing ``i``. ``table[0]`` and ``table[1]`` hold
    :data:`UNMARKED`.

    Args:
        length: Exclusive upper bound of the table.

    Raises:
        ValueError: If length is negative.
    """

    def __init__(self, length: int):
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")

        sentinel = int(UNMARKED)
        arr = [sentinel] * length
        primes: List[int] = []

        for i in range(2, length):
            if arr[i] == sentinel:
                primes.append(i)
                arr[i] = i
            least = arr[i]
            for p in primes:
                if p > least or p * i >= length:
                    break
                arr[p * i] = p

        table = np.array(arr, dtype=np.uint64)
        table.flags.writeable = False
        self._arr = table
        self._prime_count = len(primes)

        logger.debug(f"Built linear sieve: length={length}, primes={self._prime_count}")

    def __len__(self) -> int:
        return len(self._arr)

    def __repr__(self) -> str:
        return f"LinearSieve(length={len(self)})"

    def __iter__(self) -> Iterator[int]:
        """Yield every prime below the bound in ascending order."""
        for p in self.primes():
            yield int(p)

    @property
    def table(self) -> np.ndarray:
        """Read-only least-prime-factor array."""
        return self._arr

    @property
    def prime_count(self) -> int:
        """Number of primes below the bound."""
        return self._prime_count

    def _check_index(self, value: int) -> None:
        if value < 0 or value >= len(self._arr):
            raise IndexError(
                f"value {value} outside sieve range [0, {len(self._arr)})"
            )

    def is_prime(self, value: int) -> bool:
        """Check if ``value`` is prime.

        Raises:
            IndexError: If ``value`` is negative or ``>= len(self)``.
        """
        self._check_index(value)
        return int(self._arr[value]) == value

    def least_prime_factor(self, value: int) -> int | None:
        """Return the smallest prime dividing ``value``, or None for 0 and 1."""
        self._check_index(value)
        if value < 2:
            return None
        return int(self._arr[value])

    def factors(self, value: int) -> Iterator[int]:
        """Factorize ``value`` into primes in non-decreasing order.

        1 is never produced; values below 2 give an empty iterator. Each call
        returns an independent iterator.

        Raises:
            IndexError: If ``value`` is negative or ``>= len(self)``. Raised
                by this call, not on first iteration.
        """
        self._check_index(value)
        return self._iter_factors(value)

    def _iter_factors(self, value: int) -> Iterator[int]:
        while value > 1:
            p = int(self._arr[value])
            yield p
            value //= p

    def primes(self) -> np.ndarray:
        """Return all primes below the bound as an int64 array."""
        indices = np.arange(len(self._arr), dtype=np.uint64)
        return np.nonzero(self._arr == indices)[0].astype(np.int64)

    def prime_mask(self) -> np.ndarray:
        """Boolean array where ``mask[i]`` is True iff ``i`` is prime."""
        indices = np.arange(len(self._arr), dtype=np.uint64)
        return self._arr == indices


def generate_primes(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit.

    Raises:
        ValueError: If limit is less than 2.
    """
    if limit < 2:
        raise ValueError(f"Limit must be >= 2, got {limit}")

    return LinearSieve(limit + 1).primes()


def count_primes(limit: int) -> int:
    """Count prime numbers up to limit.

    Args:
        limit: Upper bound for counting.

    Returns:
        Number of primes <= limit.
    """
    if limit < 2:
        return 0

    return LinearSieve(limit + 1).prime_count


def prime_sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Size of the mask (0 to limit-1).

    Returns:
        Boolean array of length limit.
    """
    if limit < 0:
        raise ValueError(f"Limit must be >= 0, got {limit}")

    return LinearSieve(limit).prime_mask()
