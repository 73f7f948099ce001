import math

import pytest

from oddments.bigint import BigInt, factorial, power


@pytest.mark.parametrize("text", ["12345", "-42", "0", "98765432109876543210"])
def test_str_round_trip(text):
    assert str(BigInt.from_str(text)) == text


@pytest.mark.parametrize("num", [0, 1, 9, 10, -7, 123456789, -10**30])
def test_int_round_trip(num):
    big = BigInt.from_int(num)
    assert int(big) == num
    assert str(big) == str(num)


def test_from_str_skips_separators():
    assert int(BigInt.from_str("1,000")) == 1000


def test_from_str_without_digits_raises():
    with pytest.raises(ValueError):
        BigInt.from_str("abc")


def test_leading_zeros_are_dropped():
    assert BigInt.from_str("007") == BigInt.from_int(7)


def test_negative_zero_is_zero():
    assert BigInt.from_str("-0") == BigInt.from_int(0)


def test_invalid_digit_rejected():
    with pytest.raises(ValueError):
        BigInt((1, 12))


@pytest.mark.parametrize(
    "a, b",
    [(0, 0), (999, 1), (123456789, 987654321), (-5, 3), (5, -8), (-99, -1), (10**25, -(10**25))],
)
def test_addition_matches_int(a, b):
    assert int(BigInt.from_int(a) + BigInt.from_int(b)) == a + b


def test_addition_with_plain_int():
    assert int(BigInt.from_int(40) + 2) == 42
    assert int(2 + BigInt.from_int(40)) == 42


@pytest.mark.parametrize(
    "a, b",
    [(0, 12345), (9, 9), (123456789, 987654321), (-12, 34), (-12, -34), (10**20 + 7, 10**15 + 3)],
)
def test_multiplication_matches_int(a, b):
    assert int(BigInt.from_int(a) * BigInt.from_int(b)) == a * b


def test_multiplication_is_commutative():
    a = BigInt.from_str("31415926535")
    b = BigInt.from_str("27182818284")
    assert a * b == b * a


@pytest.mark.parametrize("n", [0, 1, 2, 10, 25, 50])
def test_factorial_matches_math(n):
    assert int(factorial(n)) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("base, exp", [(7, 0), (7, 1), (7, 20), (-3, 5), (10, 40)])
def test_power_matches_int(base, exp):
    assert int(power(BigInt.from_int(base), exp)) == base**exp


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(BigInt.from_int(2), -1)