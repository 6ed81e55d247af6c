"""Command-line interface for primality_test."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from primality_test.utils.config import EngineConfig, load_config
from primality_test.utils.logging import LOGGER_NAME, setup_logger

logger = logging.getLogger(LOGGER_NAME)


def cmd_check(args: argparse.Namespace, config: EngineConfig) -> int:
    """Test each value for primality."""
    from primality_test.core.widths import get_width, is_prime

    width = get_width(args.width or config.default_width)
    logger.debug(f"Checking {len(args.values)} value(s) as {width.name}")

    for value in args.values:
        if not width.contains(value):
            raise ValueError(f"{value} is not representable as {width.name}")

    start = time.perf_counter()
    for value in args.values:
        verdict = "prime" if is_prime(value, width) else "composite"
        print(f"{value}: {verdict}")
    logger.debug(f"Checked in {time.perf_counter() - start:.6f}s")

    return 0


def cmd_factor(args: argparse.Namespace, config: EngineConfig) -> int:
    """Factorize values with the configured sieve."""
    from primality_test.core.sieve import LinearSieve

    limit = config.sieve_limit
    logger.debug(f"Building sieve: limit={limit:,}")
    sieve = LinearSieve(limit)

    for value in args.values:
        factors = list(sieve.factors(value))
        if factors:
            print(f"{value} = {' * '.join(str(p) for p in factors)}")
        else:
            print(f"{value} = {value}")

    return 0


def cmd_primes(args: argparse.Namespace, config: EngineConfig) -> int:
    """List or count primes below a limit."""
    from primality_test.core.sieve import LinearSieve

    limit = args.limit if args.limit is not None else config.sieve_limit
    if limit < 0:
        raise ValueError(f"Limit must be >= 0, got {limit}")

    logger.debug(f"Building sieve: limit={limit:,}")
    sieve = LinearSieve(limit)

    if args.count:
        print(sieve.prime_count)
    else:
        for p in sieve:
            print(p)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    from primality_test.core.widths import WIDTHS

    parser = argparse.ArgumentParser(
        description="Deterministic primality testing for fixed-width unsigned integers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--log-file", default=None, help="Append debug log to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug output")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Test values for primality")
    check_parser.add_argument("values", type=int, nargs="+", help="Values to test")
    check_parser.add_argument("--width", choices=list(WIDTHS.keys()), default=None,
                              help="Integer width (default from config)")

    factor_parser = subparsers.add_parser("factor", help="Factorize values")
    factor_parser.add_argument("values", type=int, nargs="+", help="Values to factorize")

    primes_parser = subparsers.add_parser("primes", help="List primes below a limit")
    primes_parser.add_argument("--limit", type=int, default=None,
                               help="Exclusive upper bound (default from config)")
    primes_parser.add_argument("--count", action="store_true", help="Print only the count")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config) if args.config else EngineConfig()
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    level = "DEBUG" if args.verbose else config.log_level
    setup_logger(level, args.log_file or config.log_file)

    commands = {
        "check": cmd_check,
        "factor": cmd_factor,
        "primes": cmd_primes,
    }

    try:
        return commands[args.command](args, config)
    except (ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
