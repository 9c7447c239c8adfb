# ltprime/primes/sympy_backend.py
from sympy import isprime

from .backends import PrimalityBackend


class SympyBackend(PrimalityBackend):
    # sympy.isprime is exact for any size; used to cross-check the search.
    def is_prime(self, n: int) -> bool:
        return bool(isprime(int(n)))
