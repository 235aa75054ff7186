import gmpy2
import pytest

from rsaprime import InvalidModulus, mod_exp


def slow_mod_exp(b, e, m):
    r = 1
    for _ in range(e):
        r = r * b
    return r % m


def test_known_value():
    assert mod_exp(4, 13, 497) == 445


def test_matches_repeated_multiplication():
    for m in (1, 2, 7, 10, 97, 256):
        for b in (0, 1, 2, 3, 12, 255, 1000):
            for e in (0, 1, 2, 5, 16, 31):
                r = mod_exp(b, e, m)
                assert r == slow_mod_exp(b, e, m)
                assert 0 <= r < m


def test_zero_exponent():
    assert mod_exp(123, 0, 7) == 1
    assert mod_exp(0, 0, 5) == 1
    assert mod_exp(9, 0, 1) == 0


def test_large_operands():
    b = 2**300 + 12345
    e = 3**150
    m = 2**257 - 93
    assert mod_exp(b, e, m) == pow(b, e, m)


def test_returns_plain_int():
    r = mod_exp(gmpy2.mpz(4), gmpy2.mpz(13), gmpy2.mpz(497))
    assert type(r) is int
    assert r == 445


def test_zero_modulus():
    with pytest.raises(InvalidModulus):
        mod_exp(2, 10, 0)
    # also catchable as the builtin
    with pytest.raises(ZeroDivisionError):
        mod_exp(2, 0, 0)


def test_rejects_bad_input():
    with pytest.raises(ValueError):
        mod_exp(-1, 2, 5)
    with pytest.raises(ValueError):
        mod_exp(2, -1, 5)
    with pytest.raises(TypeError):
        mod_exp(2.0, 2, 5)
    with pytest.raises(TypeError):
        mod_exp(True, 2, 5)
