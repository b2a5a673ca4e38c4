"""Dynamic-size generic vector with dimension-checked arithmetic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterator

from . import config
from .errors import DimensionMismatch
from .scalar import ScalarT, zero_like

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DVec(Generic[ScalarT]):
    """Vector of any non-empty length.

    Binary operations (``+``, ``-``, :meth:`dot`) require both operands to
    have the same length and raise :class:`DimensionMismatch` otherwise.
    Scalar multiplication never fails.
    """

    data: tuple[ScalarT, ...]

    # DVec looks like a sequence to numpy; opt out so ``np_scalar * v``
    # reaches __rmul__ instead of producing an ndarray.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        data = tuple(self.data)
        if len(data) < config.MIN_DVEC_LENGTH:
            raise ValueError(config.EMPTY_DVEC_MESSAGE)
        object.__setattr__(self, "data", data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> ScalarT:
        return self.data[index]

    def __iter__(self) -> Iterator[ScalarT]:
        return iter(self.data)

    def _check_dims(self, other: "DVec[ScalarT]", operation: str) -> None:
        if not isinstance(other, DVec):
            raise TypeError(f"Cannot {operation} DVec and {type(other).__name__}")
        if len(self) != len(other):
            logger.debug(f"Rejecting {operation} of DVec lengths {len(self)} and {len(other)}")
            raise DimensionMismatch(operation, len(self), len(other))

    def __add__(self, other: "DVec[ScalarT]") -> "DVec[ScalarT]":
        if not isinstance(other, DVec):
            return NotImplemented
        self._check_dims(other, "add")
        return DVec(a + b for a, b in zip(self.data, other.data))

    def __sub__(self, other: "DVec[ScalarT]") -> "DVec[ScalarT]":
        if not isinstance(other, DVec):
            return NotImplemented
        self._check_dims(other, "sub")
        return DVec(a - b for a, b in zip(self.data, other.data))

    def __mul__(self, scalar: ScalarT) -> "DVec[ScalarT]":
        if isinstance(scalar, DVec):
            return NotImplemented
        return DVec(value * scalar for value in self.data)

    def __rmul__(self, scalar: ScalarT) -> "DVec[ScalarT]":
        return self.__mul__(scalar)

    def dot(self, other: "DVec[ScalarT]") -> ScalarT:
        """Sum of componentwise products, starting from the scalar's zero."""
        self._check_dims(other, "dot")
        return sum((a * b for a, b in zip(self.data, other.data)), zero_like(self.data[0]))
