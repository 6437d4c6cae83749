# primefilter/primes/oracle.py
import logging
import random
from typing import Optional

from ..config import miller_rabin_rounds
from .aks import AKSTest
from .backends import PrimalityTest, as_integer
from .miller_rabin import MillerRabinTest

_logger = logging.getLogger(__name__)


class PrimalityOracle:
    """
    Two-stage primality predicate.

    ``screen`` is cheap and may only err towards "prime"; whatever it lets
    through is settled by ``confirm``.
    """

    def __init__(self, screen: PrimalityTest, confirm: PrimalityTest):
        self.screen = screen
        self.confirm = confirm

    @classmethod
    def default(cls, rounds: Optional[int] = None, rng: Optional[random.Random] = None):
        if rounds is None:
            rounds = miller_rabin_rounds()
        return cls(MillerRabinTest(rounds, rng), AKSTest())

    def is_prime(self, n) -> bool:
        n = as_integer(n)
        if n <= 1:
            return False
        if not self.screen.test(n):
            return False
        _logger.debug("n=%d passed %s, confirming with %s", n, self.screen.name, self.confirm.name)
        return self.confirm.test(n)

    __call__ = is_prime

    def __repr__(self):
        return f"PrimalityOracle(screen={self.screen!r}, confirm={self.confirm!r})"


def is_prime(n, rounds: Optional[int] = None, rng: Optional[random.Random] = None) -> bool:
    return PrimalityOracle.default(rounds, rng).is_prime(n)
