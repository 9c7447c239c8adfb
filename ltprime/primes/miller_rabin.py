# ltprime/primes/miller_rabin.py
# Deterministic Miller-Rabin for n < 4,759,123,141.
#
# The witness brackets are the published deterministic bounds: every odd
# composite below a bracket's limit fails at least one of its witnesses.

from typing import Tuple

from ..errors import OracleDomainError
from .modular import modpow

ORACLE_LIMIT = 4_759_123_141

WITNESS_TABLE: Tuple[Tuple[int, Tuple[int, ...]], ...] = (
    (2_047, (2,)),
    (1_373_653, (2, 3)),
    (9_080_191, (31, 73)),
    (25_326_001, (2, 3, 5)),
    (ORACLE_LIMIT, (2, 7, 61)),
)


def witnesses_for(n: int) -> Tuple[int, ...]:
    """Witness set for n, raising OracleDomainError above the last bracket."""
    for limit, witnesses in WITNESS_TABLE:
        if n < limit:
            return witnesses
    raise OracleDomainError(n, ORACLE_LIMIT)


def _decompose(n: int):
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return s, d


def strong_probable_prime(n: int, a: int) -> bool:
    """One Miller-Rabin round: True if odd n > 2 passes for witness a."""
    s, d = _decompose(n)
    return _passes(n, a, s, d)


def _passes(n: int, a: int, s: int, d: int) -> bool:
    x = modpow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = (x * x) % n
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_prime(n: int) -> bool:
    if n == 2:
        return True
    if n <= 1 or n % 2 == 0:
        return False
    witnesses = witnesses_for(n)
    s, d = _decompose(n)
    for a in witnesses:
        if not _passes(n, a, s, d):
            return False
    return True
