# ltprime/primes/miller_rabin_backend.py
from .backends import PrimalityBackend
from .miller_rabin import ORACLE_LIMIT, is_prime


class MillerRabinBackend(PrimalityBackend):
    limit = ORACLE_LIMIT

    def is_prime(self, n: int) -> bool:
        return is_prime(int(n))
