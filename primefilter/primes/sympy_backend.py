# primefilter/primes/sympy_backend.py
from sympy import isprime

from .backends import PrimalityTest


class SympyPrimalityTest(PrimalityTest):
    """Reference verdicts from sympy, used to cross-check the oracle."""

    name = "sympy"

    def test(self, n: int) -> bool:
        return bool(isprime(int(n)))
