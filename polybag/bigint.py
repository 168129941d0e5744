"""Arbitrary-size non-negative integers stored as decimal digit strings."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest
from typing import Union

_Operand = Union["BigInt", int, str]


@total_ordering
class BigInt:
    """An immutable non-negative integer held as a string of decimal digits.

    Shifts work in decimal digits: ``x << n`` appends ``n`` zeros and
    ``x >> n`` drops the last ``n`` digits.
    """

    __slots__ = ("_digits",)

    def __init__(self, value: _Operand = 0) -> None:
        if isinstance(value, BigInt):
            digits = value._digits
        elif isinstance(value, bool):
            raise TypeError("BigInt does not accept booleans")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigInt cannot hold a negative number")
            digits = str(value)
        elif isinstance(value, str):
            if not value or not (value.isascii() and value.isdigit()):
                raise ValueError(f"not a string of decimal digits: {value!r}")
            digits = value.lstrip("0") or "0"
        else:
            raise TypeError(f"cannot make a BigInt from {type(value).__name__}")
        self._digits = digits

    @classmethod
    def _coerce(cls, other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return cls(other)
        return None

    def __str__(self) -> str:
        return self._digits

    def __repr__(self) -> str:
        return f"BigInt({self._digits!r})"

    def __int__(self) -> int:
        return int(self._digits)

    def __hash__(self) -> int:
        return hash(self._digits)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._digits == rhs._digits

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        mine, theirs = self._digits, rhs._digits
        if len(mine) != len(theirs):
            return len(mine) < len(theirs)
        return mine < theirs

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not rhs < self

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs < self

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs

    def __add__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result: list[str] = []
        carry = 0
        for a, b in zip_longest(
            reversed(self._digits), reversed(rhs._digits), fillvalue="0"
        ):
            carry, digit = divmod(int(a) + int(b) + carry, 10)
            result.append(str(digit))
        if carry:
            result.append(str(carry))
        return BigInt("".join(reversed(result)))

    def __lshift__(self, digits: int) -> BigInt:
        if not isinstance(digits, int):
            return NotImplemented
        if digits <= 0 or self._digits == "0":
            return self
        return BigInt(self._digits + "0" * digits)

    def __rshift__(self, digits: int) -> BigInt:
        if not isinstance(digits, int):
            return NotImplemented
        if digits <= 0 or self._digits == "0":
            return self
        if digits >= len(self._digits):
            return BigInt(0)
        return BigInt(self._digits[:-digits])