# primefilter/primes/miller_rabin.py
# Miller-Rabin: one-sided error, a "composite" verdict is always right.
import logging
import random
import secrets
from typing import Optional, Tuple

from ..arith.modular import pow_mod
from .backends import PrimalityTest

_logger = logging.getLogger(__name__)


def _decompose(n: int) -> Tuple[int, int]:
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return s, d


def _draw_witness(n: int, rng: Optional[random.Random]) -> int:
    # uniform in [2, n - 2]
    if rng is None:
        return secrets.randbelow(n - 3) + 2
    return rng.randrange(2, n - 1)


def is_probable_prime(n: int, rounds: int, rng: Optional[random.Random] = None) -> bool:
    """
    Probabilistic primality test.

    False positives occur with probability <= 4**-rounds, false negatives never.
    Pass a seeded ``random.Random`` as ``rng`` for reproducible witnesses;
    otherwise witnesses come from ``secrets``.
    """
    if rounds < 1:
        raise ValueError(f"rounds must be >= 1, got {rounds}")
    if n in (2, 3):
        return True
    if n < 2 or n % 2 == 0:
        return False
    s, d = _decompose(n)
    for _ in range(rounds):
        a = _draw_witness(n, rng)
        x = pow_mod(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow_mod(x, 2, n)
            if x == n - 1:
                break
            if x == 1:
                _logger.debug("n=%d: witness %d hit 1 before n-1", n, a)
                return False
        else:
            _logger.debug("n=%d: witness %d proves compositeness", n, a)
            return False
    return True


class MillerRabinTest(PrimalityTest):
    name = "miller-rabin"

    def __init__(self, rounds: int, rng: Optional[random.Random] = None):
        if rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {rounds}")
        self.rounds = rounds
        self._rng = rng

    def test(self, n: int) -> bool:
        return is_probable_prime(n, self.rounds, self._rng)

    def __repr__(self):
        return f"MillerRabinTest(rounds={self.rounds})"
