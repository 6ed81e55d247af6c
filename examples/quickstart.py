"""Quick start example for primality_test.

Run this script to exercise the main entry points and test the installation.
"""

import time


def main():
    print("Primality Test - Quick Start Demo")
    print("=" * 50)

    print("\n1. Checking known values at 64 bits...")
    from primality_test import is_prime

    for n in [2, 561, 998244353, 1000000007, 585226005592931977, 999999999999999989]:
        print(f"   {n:>20,}: {'prime' if is_prime(n) else 'composite'}")

    print("\n2. Same value, different widths...")
    from primality_test import is_prime_u16, is_prime_u32, is_prime_u64

    for check in (is_prime_u16, is_prime_u32, is_prime_u64):
        print(f"   {check.__name__}(65521) = {check(65521)}")

    print("\n3. Building a linear sieve (1M entries)...")
    from primality_test import LinearSieve

    start = time.perf_counter()
    sieve = LinearSieve(1_000_000)
    elapsed = time.perf_counter() - start

    primes = sieve.primes()
    print(f"   Found {len(primes):,} primes below 1M in {elapsed:.3f}s")
    print(f"   First 10: {primes[:10].tolist()}")
    print(f"   Last 10: {primes[-10:].tolist()}")

    print("\n4. Factorizing with the sieve...")
    for n in [360, 9991, 524287, 999999]:
        print(f"   {n} = {' * '.join(str(p) for p in sieve.factors(n))}")

    print("\n5. Timing 64-bit checks...")
    start = time.perf_counter()
    count = sum(is_prime(n) for n in range(10**18, 10**18 + 10_000))
    elapsed = time.perf_counter() - start
    print(f"   {count} primes in [10^18, 10^18 + 10^4) checked in {elapsed:.3f}s")

    print("\n" + "=" * 50)
    print("Demo complete.")
    print("\nNext steps:")
    print("  - Run 'primality-test --help' to see CLI options")
    print("  - Try 'primality-test check 4294967291 --width u32'")


if __name__ == "__main__":
    main()
