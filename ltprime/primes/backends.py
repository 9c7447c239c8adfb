# ltprime/primes/backends.py
from abc import ABC, abstractmethod
from typing import Optional


class PrimalityBackend(ABC):
    # Exclusive upper bound on n, None when the backend has no ceiling.
    limit: Optional[int] = None

    @abstractmethod
    def is_prime(self, n: int) -> bool:
        ...

    def __call__(self, n: int) -> bool:
        return self.is_prime(n)


def get_backend(name: Optional[str] = None) -> PrimalityBackend:
    name = (name or "deterministic").lower()
    if name in ("deterministic", "miller-rabin", "mr", "default"):
        from .miller_rabin_backend import MillerRabinBackend
        return MillerRabinBackend()
    if name in ("sympy", "reference"):
        from .sympy_backend import SympyBackend
        return SympyBackend()
    raise ValueError(f"Unknown backend: {name}")
