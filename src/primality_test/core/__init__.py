"""Core primality testing: Montgomery arithmetic, linear sieve, Miller-Rabin."""

from primality_test.core.montgomery import Montgomery
from primality_test.core.sieve import LinearSieve, generate_primes, count_primes, prime_sieve_mask
from primality_test.core.miller_rabin import miller_rabin, miller_rabin_u64
from primality_test.core.widths import (
    UIntWidth,
    is_prime,
    is_prime_array,
    is_prime_u8,
    is_prime_u16,
    is_prime_u32,
    is_prime_u64,
    is_prime_usize,
)

__all__ = [
    "Montgomery",
    "LinearSieve",
    "generate_primes",
    "count_primes",
    "prime_sieve_mask",
    "miller_rabin",
    "miller_rabin_u64",
    "UIntWidth",
    "is_prime",
    "is_prime_array",
    "is_prime_u8",
    "is_prime_u16",
    "is_prime_u32",
    "is_prime_u64",
    "is_prime_usize",
]
