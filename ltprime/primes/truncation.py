# ltprime/primes/truncation.py
# Direct check of the left-truncatable property, independent of the search.

from typing import Callable, List, Optional

from .miller_rabin import is_prime as _default_is_prime


def left_truncations(n: int) -> List[int]:
    """n followed by every value left after stripping leading digits.

    >>> left_truncations(9137)
    [9137, 137, 37, 7]
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = str(n)
    return [int(digits[i:]) for i in range(len(digits))]


def is_left_truncatable(n: int, is_prime: Optional[Callable[[int], bool]] = None) -> bool:
    if is_prime is None:
        is_prime = _default_is_prime
    if n < 2 or "0" in str(n):
        return False
    return all(is_prime(t) for t in left_truncations(n))
