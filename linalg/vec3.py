"""Generic 3D vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator

from .scalar import ScalarT


@dataclass(frozen=True)
class Vec3(Generic[ScalarT]):
    x: ScalarT
    y: ScalarT
    z: ScalarT

    __array_ufunc__ = None

    def __add__(self, other: "Vec3[ScalarT]") -> "Vec3[ScalarT]":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3[ScalarT]") -> "Vec3[ScalarT]":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: ScalarT) -> "Vec3[ScalarT]":
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: ScalarT) -> "Vec3[ScalarT]":
        return self.__mul__(scalar)

    def __iter__(self) -> Iterator[ScalarT]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vec3[ScalarT]") -> ScalarT:
        """Sum of the three componentwise products."""
        return self.x * other.x + self.y * other.y + self.z * other.z
