"""Errors raised by vector operations."""

from __future__ import annotations

from enum import Enum


class VectorErrorKind(Enum):
    DIMENSION_MISMATCH = "dimension_mismatch"


class VectorError(ValueError):
    """Base class for recoverable vector errors."""

    kind: VectorErrorKind


class DimensionMismatch(VectorError):
    """Two dynamic vectors of different length were combined."""

    kind = VectorErrorKind.DIMENSION_MISMATCH

    def __init__(self, operation: str, left: int, right: int) -> None:
        super().__init__(f"Dimension mismatch in {operation}: {left} != {right}")
        self.operation = operation
        self.left = left
        self.right = right
