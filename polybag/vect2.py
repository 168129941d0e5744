"""A mutable two-dimensional integer vector."""

from __future__ import annotations

from collections.abc import Iterator


class Vect2:
    """A pair of integers with vector arithmetic.

    Index ``0`` addresses the x component; any other index addresses y.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y

    def __getitem__(self, index: int) -> int:
        return self.x if index == 0 else self.y

    def __setitem__(self, index: int, value: int) -> None:
        if index == 0:
            self.x = value
        else:
            self.y = value

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    @staticmethod
    def _is_scalar(value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def __add__(self, other: object) -> Vect2:
        if not isinstance(other, Vect2):
            return NotImplemented
        return Vect2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vect2:
        if not isinstance(other, Vect2):
            return NotImplemented
        return Vect2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vect2:
        if not self._is_scalar(scalar):
            return NotImplemented
        return Vect2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: object) -> Vect2:
        return self.__mul__(scalar)

    def __iadd__(self, other: object) -> Vect2:
        if not isinstance(other, Vect2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: object) -> Vect2:
        if not isinstance(other, Vect2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: object) -> Vect2:
        if not self._is_scalar(scalar):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vect2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # mutable, so not hashable

    def __str__(self) -> str:
        return f"{{{self.x}, {self.y}}}"

    def __repr__(self) -> str:
        return f"Vect2({self.x}, {self.y})"