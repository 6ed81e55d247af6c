"""Deterministic Miller-Rabin primality test for fixed-width integers.

For integers of at most 64 bits, small fixed witness sets are known to
decide primality exactly. The sets used here follow
https://miller-rabin.appspot.com/:

- ``{2, 7, 61}`` is sufficient for every 32-bit integer.
- ``{2, 325, 9375, 28178, 450775, 9780504, 1795265022}`` is sufficient for
  every 64-bit integer.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from primality_test.core.montgomery import Montgomery
from primality_test.core.sieve import LinearSieve

WITNESSES_32: Tuple[int, ...] = (2, 7, 61)
WITNESSES_64: Tuple[int, ...] = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)

SMALL_PRIMES_LEN = 255

# Shared by every call; never mutated after import.
SMALL_PRIMES_MEMO = LinearSieve(SMALL_PRIMES_LEN)


def _witness_accepts(mont: Montgomery, a: int, s: int, t: int) -> bool:
    """Run one Miller-Rabin round for witness ``a`` (an ordinary residue).

    ``p - 1 == t * 2**s`` with ``t`` odd. Returns True if ``a`` fails to prove
    ``p`` composite.
    """
    minus_one = mont.minus_one
    at = mont.pow(mont.convert(a), t)

    # a^t == 1 or a^t == -1 (mod p)
    if at == mont.r or at == minus_one:
        return True

    # a^(2^j * t) == -1 (mod p) for some 0 < j < s
    for _ in range(1, s):
        at = mont.multiply(at, at)
        if at == minus_one:
            return True
    return False


def _decompose(p: int) -> Tuple[int, int]:
    """Split ``p - 1`` into ``(s, t)`` with ``p - 1 == t * 2**s``, ``t`` odd."""
    d = p - 1
    s = (d & -d).bit_length() - 1
    return s, d >> s


def _passes_all(p: int, bits: int, witnesses: Sequence[int]) -> bool:
    """Run every witness round on odd ``p > 2``; False on the first failure."""
    mont = Montgomery(p, bits)
    s, t = _decompose(p)

    for a in witnesses:
        a %= p
        # Only small p on the sieve-free path can hit this.
        if a == 0:
            continue
        if not _witness_accepts(mont, a, s, t):
            return False
    return True


def miller_rabin(p: int, bits: int, witnesses: Sequence[int]) -> bool:
    """Decide primality of ``p`` using a fixed witness set.

    Values below :data:`SMALL_PRIMES_LEN` are answered from
    :data:`SMALL_PRIMES_MEMO`. Larger odd values run one Montgomery-based round
    per witness and stop at the first witness proving ``p`` composite.

    Args:
        p: Value to test, ``0 <= p < 2**bits``.
        bits: Width of the Montgomery words.
        witnesses: Witness set proven sufficient for ``bits``-wide values.

    Returns:
        True if ``p`` is prime.
    """
    if p == 1 or p & 1 == 0:
        return p == 2

    if p < SMALL_PRIMES_LEN:
        return SMALL_PRIMES_MEMO.is_prime(p)

    return _passes_all(p, bits, witnesses)


def miller_rabin_u64(p: int) -> bool:
    """Determine if a 64-bit value is prime without the sieve or cascade.

    Every value takes the Montgomery path with the 64-bit witness set, each
    witness reduced mod ``p`` and skipped when that leaves 0. Slower than the
    width dispatch for small inputs, but self-contained.

    Raises:
        ValueError: If ``p`` is negative or wider than 64 bits.
    """
    if p < 0 or p >> 64:
        raise ValueError(f"{p} is not a 64-bit unsigned integer")

    if p == 1 or p & 1 == 0:
        return p == 2

    return _passes_all(p, 64, WITNESSES_64)
