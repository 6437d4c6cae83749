# primefilter/primes/aks.py
# Polynomial time, large constant, no randomness. Used only to confirm
# Miller-Rabin survivors.
#
# This is the scalar reference form: step 4 checks a**(n-1) mod n instead of
# the (X + a)**n congruence over Z_n[X]/(X**r - 1), and the perfect-power
# check extracts roots in floating point.
import logging
import math

from ..arith.modular import gcd, multiplicative_order, pow_mod
from .backends import PrimalityTest

_logger = logging.getLogger(__name__)


def _ceil_log2(n: int) -> int:
    # exact ceil(log2(n)) for n >= 1
    return (n - 1).bit_length()


def _find_r(n: int, log2n: int):
    """
    Smallest r with ord_r(n) > log2n**2, scanning r = 2, 3, ... below n.

    Returns (r, composite); composite is True as soon as some r < n shares a
    factor with n.
    """
    limit = log2n ** 2
    r = 2
    while r < n:
        if gcd(r, n) != 1:
            return r, True
        if multiplicative_order(n, r) > limit:
            break
        r += 1
    return r, False


def _is_perfect_power(n: int, log2n: int) -> bool:
    for a in range(2, log2n + 1):
        b = math.floor(math.exp(math.log(n) / a))
        if b ** a == n:
            return True
    return False


def is_prime_deterministic(n: int) -> bool:
    if n <= 1:
        return False
    log2n = _ceil_log2(n)

    r, composite = _find_r(n, log2n)
    if composite:
        _logger.debug("n=%d shares a factor with r=%d", n, r)
        return False

    if _is_perfect_power(n, log2n):
        _logger.debug("n=%d is a perfect power", n)
        return False

    for a in range(1, int(math.sqrt(r) * log2n) + 1):
        b = pow_mod(a, n - 1, n) - 1
        if b != 0 and b % n == 0:
            _logger.debug("n=%d fails the final congruence at a=%d", n, a)
            return False
    return True


class AKSTest(PrimalityTest):
    name = "aks"

    def test(self, n: int) -> bool:
        return is_prime_deterministic(n)
