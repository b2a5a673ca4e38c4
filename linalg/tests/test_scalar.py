import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as np

from linalg import DVec
from linalg.scalar import zero_like


class Mod7:
    def __init__(self, value: int) -> None:
        self.value = value % 7

    def __add__(self, other: "Mod7") -> "Mod7":
        return Mod7(self.value + other.value)

    def __sub__(self, other: "Mod7") -> "Mod7":
        return Mod7(self.value - other.value)

    def __mul__(self, other: "Mod7") -> "Mod7":
        return Mod7(self.value * other.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Mod7) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


class ZeroLikeTests(unittest.TestCase):
    def test_builtin_numbers(self) -> None:
        self.assertEqual(zero_like(5), 0)
        self.assertIsInstance(zero_like(5), int)
        self.assertEqual(zero_like(2.5), 0.0)
        self.assertIsInstance(zero_like(2.5), float)
        self.assertEqual(zero_like(1 + 2j), 0j)

    def test_exact_and_numpy_numbers(self) -> None:
        self.assertEqual(zero_like(Fraction(3, 4)), Fraction(0))
        self.assertEqual(zero_like(Decimal("1.5")), Decimal(0))
        self.assertIsInstance(zero_like(np.float32(3.0)), np.float32)
        self.assertIsInstance(zero_like(np.int64(3)), np.int64)

    def test_custom_scalar_falls_back_to_self_subtraction(self) -> None:
        self.assertEqual(zero_like(Mod7(5)), Mod7(0))

    def test_custom_scalar_dot(self) -> None:
        a = DVec([Mod7(3), Mod7(4)])
        b = DVec([Mod7(5), Mod7(6)])
        # 15 + 24 = 39 = 4 (mod 7)
        self.assertEqual(a.dot(b), Mod7(4))
        self.assertEqual(a * Mod7(2), DVec([Mod7(6), Mod7(1)]))


if __name__ == "__main__":
    unittest.main()
