import math

import pytest

from rsaprime import InvalidModulus, gcdext, mod_inverse


def test_bezout_identity():
    for a in range(0, 60):
        for b in range(0, 60, 7):
            g, x, y = gcdext(a, b)
            assert g == math.gcd(a, b)
            assert a * x + b * y == g


def test_known_values():
    assert gcdext(240, 46) == (2, -9, 47)
    assert gcdext(0, 0) == (0, 1, 0)
    assert gcdext(12, 0) == (12, 1, 0)
    assert gcdext(0, 12) == (12, 0, 1)


def test_large():
    a = 2**521 - 1
    b = 4829837983753984028472098472089547098728675098723407520875297
    g, x, y = gcdext(a, b)
    assert g == 1
    assert a * x + b * y == 1


def test_mod_inverse():
    assert mod_inverse(3, 11) == 4
    assert mod_inverse(65537, 3120) == 2753
    assert mod_inverse(5, 1) == 0
    with pytest.raises(ValueError):
        mod_inverse(6, 9)
    with pytest.raises(InvalidModulus):
        mod_inverse(3, 0)


def test_rejects_negative():
    with pytest.raises(ValueError):
        gcdext(-3, 5)
