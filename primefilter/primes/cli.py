# primefilter/primes/cli.py
# Usage: python -m primefilter.primes.cli 97 1000003 [--rounds 8] [--check] [--seed 1] [--verbose]

import argparse
import logging
import random
import sys
import time

from primefilter.config import miller_rabin_rounds
from primefilter.primes.oracle import PrimalityOracle
from primefilter.primes.sympy_backend import SympyPrimalityTest

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_oracle(rounds, seed):
    if rounds is None:
        rounds = miller_rabin_rounds()
    rng = random.Random(seed) if seed is not None else None
    return PrimalityOracle.default(rounds=rounds, rng=rng)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Two-stage (Miller-Rabin + AKS) primality oracle")
    parser.add_argument("numbers", type=int, nargs="+", help="Integers to classify")
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Miller-Rabin rounds (default: $PRIMEFILTER_MR_ROUNDS or 4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the witness generator for reproducible runs",
    )
    parser.add_argument("--check", action="store_true", help="Cross-check every verdict with sympy.isprime")
    parser.add_argument("--verbose", action="store_true", help="Log oracle decisions")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        oracle = build_oracle(args.rounds, args.seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    reference = SympyPrimalityTest() if args.check else None
    mismatches = 0
    for n in args.numbers:
        t0 = time.time()
        verdict = oracle.is_prime(n)
        dt = time.time() - t0
        line = f"{n}: {'prime' if verdict else 'not prime'} ({dt:.3f}s)"
        if reference is not None:
            expected = reference.test(n)
            if expected != verdict:
                mismatches += 1
                line += f"  MISMATCH (sympy: {'prime' if expected else 'not prime'})"
        print(line)

    if mismatches:
        print(f"{mismatches} verdict(s) disagree with sympy", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
