"""Generic 2D vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator

from .scalar import ScalarT


@dataclass(frozen=True)
class Vec2(Generic[ScalarT]):
    """2D vector over any scalar closed under ``+``, ``-`` and ``*``."""

    x: ScalarT
    y: ScalarT

    # numpy scalars defer to __rmul__ instead of broadcasting.
    __array_ufunc__ = None

    def __add__(self, other: "Vec2[ScalarT]") -> "Vec2[ScalarT]":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2[ScalarT]") -> "Vec2[ScalarT]":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: ScalarT) -> "Vec2[ScalarT]":
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: ScalarT) -> "Vec2[ScalarT]":
        return self.__mul__(scalar)

    def __iter__(self) -> Iterator[ScalarT]:
        yield self.x
        yield self.y

    def dot(self, other: "Vec2[ScalarT]") -> ScalarT:
        return self.x * other.x + self.y * other.y
