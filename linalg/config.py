"""Default values shared by the linalg vector types."""

from __future__ import annotations

MIN_DVEC_LENGTH = 1
EMPTY_DVEC_MESSAGE = "DVec cannot be empty"
