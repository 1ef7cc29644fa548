"""Arithmetic on non-negative integers written as decimal digit strings."""

from __future__ import annotations

from itertools import zip_longest

_DIGITS = frozenset("0123456789")


def _check(number: str) -> str:
    if not number or not _DIGITS.issuperset(number):
        raise ValueError(f"not a decimal digit string: {number!r}")
    return number


def _strip(digits: str) -> str:
    return digits.lstrip("0") or "0"


def _compare(a: str, b: str) -> int:
    width = max(len(a), len(b))
    left, right = a.rjust(width, "0"), b.rjust(width, "0")
    return (left > right) - (left < right)


def larger(a: str, b: str) -> str | None:
    """Return whichever of ``a`` and ``b`` is larger, or ``None`` if they are equal."""
    _check(a)
    _check(b)
    order = _compare(a, b)
    if order > 0:
        return a
    if order < 0:
        return b
    return None


def to_int(a: str) -> int:
    """Return the value of the digit string ``a``."""
    return int(_check(a))


def add(a: str, b: str) -> str:
    """Return the sum of two digit strings.

    The result is as wide as the wider operand, plus any final carry, so
    leading zeros of the operands are kept.
    """
    _check(a)
    _check(b)
    result = []
    carry = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry += int(da) + int(db)
        result.append(str(carry % 10))
        carry //= 10
    if carry:
        result.append(str(carry))
    return "".join(reversed(result))


def subtract(a: str, b: str) -> str:
    """Return ``a - b``, prefixed with ``-`` when the difference is negative."""
    _check(a)
    _check(b)
    negative = _compare(a, b) < 0
    if negative:
        a, b = b, a
    result = []
    borrow = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        digit = int(da) - int(db) - borrow
        borrow = 1 if digit < 0 else 0
        result.append(str(digit + 10 * borrow))
    difference = _strip("".join(reversed(result)))
    return "-" + difference if negative else difference


def multiply(a: str, b: str) -> str:
    """Return the product of two digit strings, without leading zeros."""
    _check(a)
    _check(b)
    product = [0] * (len(a) + len(b))
    for i, da in enumerate(reversed(a)):
        for j, db in enumerate(reversed(b)):
            product[i + j] += int(da) * int(db)
    digits = []
    carry = 0
    for column in product:
        carry += column
        digits.append(str(carry % 10))
        carry //= 10
    while carry:
        digits.append(str(carry % 10))
        carry //= 10
    return _strip("".join(reversed(digits)))


def remainder(a: str, b: int) -> int:
    """Return the remainder of the digit string ``a`` divided by the integer ``b``."""
    _check(a)
    if b == 0:
        raise ZeroDivisionError("division by zero")
    if b < 0:
        raise ValueError("divisor must be positive")
    rest = 0
    for digit in a:
        rest = (rest * 10 + int(digit)) % b
    return rest