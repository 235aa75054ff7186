# rsaprime/euclid.py
# Extended Euclid and the modular inverse built on it.

from __future__ import annotations
from typing import Tuple

from .errors import InvalidModulus
from .modexp import check_natural


def gcdext(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) with g = gcd(a, b) = a*x + b*y. x and y may be negative."""
    a = check_natural(a, "a")
    b = check_natural(b, "b")
    x, last_x = 0, 1
    y, last_y = 1, 0
    while b:
        q, r = divmod(a, b)
        a, b = b, r
        x, last_x = last_x - q * x, x
        y, last_y = last_y - q * y, y
    return a, last_x, last_y


def mod_inverse(a: int, modulus: int) -> int:
    """x in [0, modulus) with a*x == 1 (mod modulus)."""
    modulus = check_natural(modulus, "modulus")
    if modulus == 0:
        raise InvalidModulus("modulus must be >= 1")
    g, x, _ = gcdext(a, modulus)
    if g != 1:
        raise ValueError(f"{a} has no inverse mod {modulus}")
    return x % modulus
