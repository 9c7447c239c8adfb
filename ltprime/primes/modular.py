# ltprime/primes/modular.py
# Square-and-multiply modular exponentiation.
#
# Every intermediate stays below modulus**2, so for moduli inside the oracle's
# range (< 4,759,123,141) the values would fit an unsigned 64-bit word as well.


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Return (base ** exponent) % modulus.

    base is reduced on entry and after every squaring, the running product
    after every multiplication. A modulus of 1 always yields 0.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    base %= modulus
    result = 1 % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result
