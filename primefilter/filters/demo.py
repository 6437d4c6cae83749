# primefilter/filters/demo.py
# Drop the elements of A whose count in B is prime, and print what is left.
# Usage examples:
#   python -m primefilter.filters.demo
#   python -m primefilter.filters.demo --a 2 3 9 --b 3 3 9 --show-counts

import argparse
import logging
import sys

from primefilter.filters.frequency import FrequencyFilter
from primefilter.primes.oracle import PrimalityOracle

DEMO_A = [2, 3, 9, 2, 5, 1, 3, 7, 10]
DEMO_B = [2, 1, 3, 4, 3, 10, 6, 6, 1, 7, 10, 10, 10]
DEMO_EXPECTED = [2, 9, 2, 5, 7, 10]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Filter A by the primality of each element's count in B")
    p.add_argument("--a", type=int, nargs="*", default=None, help="Sequence A (default: demo array)")
    p.add_argument("--b", type=int, nargs="*", default=None, help="Sequence B (default: demo array)")
    p.add_argument("--show-counts", action="store_true", help="Print each count in B and its verdict")
    p.add_argument("--verbose", action="store_true", help="Log oracle decisions")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    is_demo = args.a is None and args.b is None
    A = DEMO_A if args.a is None else args.a
    B = DEMO_B if args.b is None else args.b

    try:
        flt = FrequencyFilter(PrimalityOracle.default())
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    C = flt.apply(A, B)

    print(f"A: {A}")
    print(f"B: {B}")
    if args.show_counts:
        for count, verdict in sorted(flt.classify_counts(B).items()):
            print(f"count {count}: {'prime (dropped)' if verdict else 'not prime (kept)'}")
    print(f"result: {C}")

    if is_demo and C != DEMO_EXPECTED:
        print(f"Error: expected {DEMO_EXPECTED}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
