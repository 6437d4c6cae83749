# primefilter/filters/frequency.py
# Keep the elements of A whose multiplicity in B is not prime.
import logging
from collections import Counter
from types import MappingProxyType
from typing import Dict, Hashable, Iterable, List, Mapping, Optional

from ..primes.oracle import PrimalityOracle

_logger = logging.getLogger(__name__)


def frequency_map(B: Iterable[Hashable]) -> Mapping[Hashable, int]:
    return MappingProxyType(Counter(B))


class FrequencyFilter:
    def __init__(self, oracle: Optional[PrimalityOracle] = None):
        self.oracle = oracle if oracle is not None else PrimalityOracle.default()

    def apply(self, A: Iterable, B: Iterable) -> List:
        """
        Elements of A, in order and with duplicates, whose count in B is not
        prime. Elements missing from B are always kept.

        Each distinct count is classified once per call.
        """
        counts = frequency_map(B)
        primes: Dict[int, bool] = {}
        C = []
        for x in A:
            if x not in counts:
                C.append(x)
                continue
            c = counts[x]
            if c in primes:
                _logger.debug("count %d: cached verdict %s", c, primes[c])
            else:
                primes[c] = self.oracle.is_prime(c)
            if not primes[c]:
                C.append(x)
        return C

    def classify_counts(self, B: Iterable) -> Dict[int, bool]:
        verdicts: Dict[int, bool] = {}
        for c in frequency_map(B).values():
            if c not in verdicts:
                verdicts[c] = self.oracle.is_prime(c)
        return verdicts


def filter_by_frequency(A: Iterable, B: Iterable, oracle: Optional[PrimalityOracle] = None) -> List:
    return FrequencyFilter(oracle).apply(A, B)


def classify_counts(B: Iterable, oracle: Optional[PrimalityOracle] = None) -> Dict[int, bool]:
    return FrequencyFilter(oracle).classify_counts(B)
