# ltprime/search/ltp_search.py
# Rank lookup of left-truncatable primes by prepending leading digits.
#
# Order k turns every extendable LTP with k digits into its (k+1)-digit
# children, digit by digit and tail by tail in discovery order. All order-k
# values are smaller than all order-(k+1) values and tails are smaller than
# the multiplier, so candidates come out in ascending order and the running
# count is the rank.

from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import InvalidCapacityError, InvalidRankError, SearchExhaustedError
from ..primes.backends import PrimalityBackend
from ..primes.miller_rabin_backend import MillerRabinBackend
from .frontier import FrontierRing

SEED = (2, 3, 5, 7)
MAX_RANK = 2166
# Peak live entries of a run to MAX_RANK: 315 tails of order 7 plus their 373
# extendable children. frontier_profile() reports it.
DEFAULT_CAPACITY = 688
# Order 8 produces the 9-digit LTPs; 10-digit values cross the oracle ceiling.
FINAL_ORDER = 8


@dataclass
class OrderStats:
    order: int
    found: int = 0
    retained: int = 0


@dataclass
class SearchStats:
    oracle_calls: int = 0
    peak_occupancy: int = 0
    orders: List[OrderStats] = field(default_factory=list)


@dataclass
class SearchResult:
    rank: int
    value: int
    order: int
    stats: SearchStats


def check_rank(rank) -> int:
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise TypeError(f"rank must be an int, got {type(rank).__name__}")
    if not 1 <= rank <= MAX_RANK:
        raise InvalidRankError(rank, MAX_RANK)
    return rank


class LTPSearch:
    def __init__(self, rank: int, backend: Optional[PrimalityBackend] = None,
                 capacity: int = DEFAULT_CAPACITY):
        self.rank = check_rank(rank)
        self.backend = backend if backend is not None else MillerRabinBackend()
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < len(SEED):
            raise InvalidCapacityError(capacity, len(SEED))
        self.capacity = capacity
        self.stats = SearchStats()

    def _is_prime(self, n: int) -> bool:
        self.stats.oracle_calls += 1
        return self.backend.is_prime(n)

    def _extendable(self, value: int, multiplier: int) -> bool:
        """True if some leading digit at `multiplier` keeps value prime."""
        for v in range(1, 10):
            if self._is_prime(value + v * multiplier):
                return True
        return False

    def _done(self, value: int, order: int, ring: FrontierRing) -> SearchResult:
        self.stats.peak_occupancy = ring.peak
        return SearchResult(rank=self.rank, value=value, order=order, stats=self.stats)

    def run(self) -> SearchResult:
        self.stats = SearchStats()
        ring = FrontierRing(self.capacity, SEED)
        if self.rank <= len(SEED):
            return self._done(SEED[self.rank - 1], 0, ring)

        count = len(SEED)
        order = 0
        while order < FINAL_ORDER:
            order += 1
            multiplier = 10 ** order
            level = OrderStats(order)
            self.stats.orders.append(level)
            # Children appended below sit past the boundary and wait for the next order.
            boundary = len(ring)
            for i in range(1, 10):
                for k in range(boundary):
                    candidate = ring[k] + i * multiplier
                    if not self._is_prime(candidate):
                        continue
                    count += 1
                    level.found += 1
                    if count == self.rank:
                        return self._done(candidate, order, ring)
                    # Nothing consumes the ring after the final order.
                    if order < FINAL_ORDER and self._extendable(candidate, multiplier * 10):
                        ring.append(candidate)
                        level.retained += 1
            ring.release(boundary)

        self.stats.peak_occupancy = ring.peak
        raise SearchExhaustedError(
            f"rank {self.rank} not reached after {FINAL_ORDER} orders ({count} LTPs found)"
        )


def find_ltp(rank: int, backend: Optional[PrimalityBackend] = None,
             capacity: int = DEFAULT_CAPACITY) -> int:
    """Return the left-truncatable prime at 1-based `rank` (1..2166)."""
    return LTPSearch(rank, backend=backend, capacity=capacity).run().value


def frontier_profile(capacity: int = DEFAULT_CAPACITY,
                     backend: Optional[PrimalityBackend] = None) -> SearchStats:
    """Run the search to MAX_RANK and return its statistics.

    The peak occupancy is the smallest ring capacity that serves every rank.
    """
    return LTPSearch(MAX_RANK, backend=backend, capacity=capacity).run().stats
