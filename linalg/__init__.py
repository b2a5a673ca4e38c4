"""Generic fixed-size and dynamic-size vectors."""

import logging

from .dvec import DVec
from .errors import DimensionMismatch, VectorError, VectorErrorKind
from .scalar import Scalar, zero_like
from .vec2 import Vec2
from .vec3 import Vec3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DVec",
    "DimensionMismatch",
    "Scalar",
    "Vec2",
    "Vec3",
    "VectorError",
    "VectorErrorKind",
    "zero_like",
]
