# rsaprime/modexp.py
# (base ** exponent) % modulus by right-to-left square-and-multiply.
# gmpy2 carries the big-number multiply/reduce; callers get plain ints back.

from __future__ import annotations
import operator

import gmpy2

from .errors import InvalidModulus


def check_natural(value, name: str = "n") -> int:
    """Coerce an integer-like value to int, rejecting bools and negatives."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, not bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Square-and-multiply over the bits of exponent, low bit first.
    Result is in [0, modulus). modulus == 0 raises InvalidModulus.
    """
    base = check_natural(base, "base")
    exponent = check_natural(exponent, "exponent")
    modulus = check_natural(modulus, "modulus")
    if modulus == 0:
        raise InvalidModulus("modulus must be >= 1")

    m = gmpy2.mpz(modulus)
    result = gmpy2.mpz(1) % m
    acc = gmpy2.mpz(base) % m
    e = gmpy2.mpz(exponent)
    while e > 0:
        if e & 1:
            result = (result * acc) % m
        acc = (acc * acc) % m
        e >>= 1
    return int(result)
