# ltprime/errors.py
# Everything the search can raise. The CLI maps these onto exit codes.


class LTPError(Exception):
    """Base class for ltprime errors."""


class InvalidRankError(LTPError, ValueError):
    def __init__(self, rank, max_rank):
        super().__init__(f"rank must be between 1 and {max_rank}, got {rank}")
        self.rank = rank
        self.max_rank = max_rank


class OracleDomainError(LTPError, ValueError):
    """Primality requested for a value the witness table does not cover."""

    def __init__(self, n, limit):
        super().__init__(f"{n} is outside the deterministic range (n < {limit})")
        self.n = n
        self.limit = limit


class BufferOverflowError(LTPError, OverflowError):
    """Frontier ring is full; appending would overwrite a live entry."""


class SearchExhaustedError(LTPError, RuntimeError):
    """All orders were expanded without reaching the requested rank."""


class InvalidCapacityError(LTPError, ValueError):
    """Ring capacity too small to hold the seed primes."""

    def __init__(self, capacity, minimum):
        super().__init__(f"capacity must be at least {minimum}, got {capacity}")
        self.capacity = capacity
        self.minimum = minimum
