"""Arbitrary precision signed integers stored as decimal digits."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Union

_Operand = Union["BigInt", int]


def _normalise(digits: Iterable[int]) -> tuple[int, ...]:
    """Strip leading zeros (stored at the end) and keep at least one digit."""
    result = list(digits)
    for digit in result:
        if not 0 <= digit <= 9:
            raise ValueError(f"invalid decimal digit: {digit!r}")
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return tuple(result) if result else (0,)


def _carry(values: Iterable[int]) -> list[int]:
    """Turn column sums into proper decimal digits, propagating carries."""
    digits: list[int] = []
    carry = 0
    for value in values:
        carry, digit = divmod(value + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return digits


def _compare_magnitudes(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for da, db in zip(reversed(a), reversed(b)):
        if da != db:
            return -1 if da < db else 1
    return 0


def _add_magnitudes(a: tuple[int, ...], b: tuple[int, ...]) -> list[int]:
    return _carry(da + db for da, db in zip_longest(a, b, fillvalue=0))


def _subtract_magnitudes(a: tuple[int, ...], b: tuple[int, ...]) -> list[int]:
    """Return |a| - |b|, where |a| >= |b|."""
    digits: list[int] = []
    borrow = 0
    for da, db in zip_longest(a, b, fillvalue=0):
        value = da - db - borrow
        borrow = 1 if value < 0 else 0
        digits.append(value + 10 * borrow)
    return digits


@dataclass(frozen=True)
class BigInt:
    """A signed integer held as little-endian decimal digits."""

    digits: tuple[int, ...]
    negative: bool = False

    def __post_init__(self) -> None:
        digits = _normalise(self.digits)
        object.__setattr__(self, "digits", digits)
        object.__setattr__(self, "negative", bool(self.negative) and digits != (0,))

    @classmethod
    def from_int(cls, num: int) -> BigInt:
        magnitude = abs(num)
        digits: list[int] = []
        while True:
            magnitude, digit = divmod(magnitude, 10)
            digits.append(digit)
            if not magnitude:
                break
        return cls(tuple(digits), num < 0)

    @classmethod
    def from_str(cls, text: str) -> BigInt:
        """Parse decimal text; a leading '-' makes it negative, other non-digits are skipped."""
        digits = [int(ch) for ch in text if ch in "0123456789"]
        if not digits:
            raise ValueError(f"no digits in {text!r}")
        return cls(tuple(reversed(digits)), text.startswith("-"))

    @staticmethod
    def _coerce(value: _Operand) -> BigInt:
        if isinstance(value, BigInt):
            return value
        if isinstance(value, int):
            return BigInt.from_int(value)
        raise TypeError(f"cannot use {type(value).__name__} as BigInt")

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        return sign + "".join(str(d) for d in reversed(self.digits))

    def __int__(self) -> int:
        value = int(str(self).lstrip("-"))
        return -value if self.negative else value

    def __neg__(self) -> BigInt:
        return BigInt(self.digits, not self.negative)

    def __add__(self, other: _Operand) -> BigInt:
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        if self.negative == other.negative:
            return BigInt(tuple(_add_magnitudes(self.digits, other.digits)), self.negative)
        order = _compare_magnitudes(self.digits, other.digits)
        if order == 0:
            return BigInt((0,))
        larger, smaller = (self, other) if order > 0 else (other, self)
        return BigInt(
            tuple(_subtract_magnitudes(larger.digits, smaller.digits)), larger.negative
        )

    __radd__ = __add__

    def __mul__(self, other: _Operand) -> BigInt:
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        columns = [0] * (len(self.digits) + len(other.digits))
        for i, da in enumerate(self.digits):
            for j, db in enumerate(other.digits):
                columns[i + j] += da * db
        return BigInt(tuple(_carry(columns)), self.negative != other.negative)

    __rmul__ = __mul__


def factorial(n: int) -> BigInt:
    """Return n! as a BigInt."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = BigInt.from_int(1)
    for i in range(2, n + 1):
        result = result * BigInt.from_int(i)
    return result


def power(base: _Operand, exp: int) -> BigInt:
    """Return base raised to a non-negative integer exponent."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    base = BigInt._coerce(base)
    result = BigInt.from_int(1)
    for _ in range(exp):
        result = result * base
    return result