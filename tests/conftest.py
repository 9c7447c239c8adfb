from __future__ import annotations

import pytest
from sympy import isprime


def enumerate_ltps(max_digits: int) -> list[int]:
    """Every LTP with at most max_digits digits, ascending, built with sympy only."""
    level = [2, 3, 5, 7]
    found = list(level)
    for k in range(1, max_digits):
        m = 10**k
        level = sorted(d * m + t for d in range(1, 10) for t in level if isprime(d * m + t))
        found.extend(level)
    return found


@pytest.fixture(scope="session")
def reference_ltps() -> list[int]:
    """All 2166 LTPs below 10**9."""
    return enumerate_ltps(9)
