"""Scalar capability shared by every vector type."""

from __future__ import annotations

from numbers import Number
from typing import Protocol, TypeVar


class Scalar(Protocol):
    """Anything closed under ``+``, ``-`` and ``*``."""

    def __add__(self, other, /): ...

    def __sub__(self, other, /): ...

    def __mul__(self, other, /): ...


ScalarT = TypeVar("ScalarT", bound=Scalar)


def zero_like(sample: ScalarT) -> ScalarT:
    """Return the additive identity for the type of ``sample``.

    Numbers (including numpy scalars, Fraction and Decimal) build their zero
    directly. Other scalars fall back to ``sample - sample``.
    """
    if isinstance(sample, Number):
        return type(sample)(0)
    return sample - sample
