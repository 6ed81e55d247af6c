"""primality_test - deterministic primality testing for fixed-width unsigned integers."""

__version__ = "0.1.0"

from primality_test.core.sieve import LinearSieve, generate_primes
from primality_test.core.miller_rabin import miller_rabin_u64
from primality_test.core.widths import (
    is_prime,
    is_prime_array,
    is_prime_u8,
    is_prime_u16,
    is_prime_u32,
    is_prime_u64,
    is_prime_usize,
)

__all__ = [
    "LinearSieve",
    "generate_primes",
    "miller_rabin_u64",
    "is_prime",
    "is_prime_array",
    "is_prime_u8",
    "is_prime_u16",
    "is_prime_u32",
    "is_prime_u64",
    "is_prime_usize",
]
