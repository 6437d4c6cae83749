# primefilter/primes/backends.py
from abc import ABC, abstractmethod
import numbers

import numpy as np


def as_integer(n) -> int:
    """
    Coerce a primality query to a Python int.

    numpy scalars are widened to int so squaring can never overflow 64 bits.
    bool and non-integral values are rejected.
    """
    if isinstance(n, (bool, np.bool_)):
        raise TypeError("primality is not defined for bool")
    if isinstance(n, np.integer):
        return int(n)
    if isinstance(n, numbers.Integral):
        return int(n)
    raise TypeError(f"primality query must be an integer, got {type(n).__name__}")


class PrimalityTest(ABC):
    name = "abstract"

    @abstractmethod
    def test(self, n: int) -> bool:
        ...

    def __call__(self, n: int) -> bool:
        return self.test(n)

    def __repr__(self):
        return f"{type(self).__name__}()"
