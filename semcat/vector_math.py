"""Vector primitives used for embedding comparison."""

from __future__ import annotations

import math
from collections.abc import Sequence

from semcat.errors import DimensionMismatchError


def magnitude(vector: Sequence[float]) -> float:
    # hypot scales internally, so very large or tiny components neither overflow nor underflow
    return math.hypot(*vector)


def normalize(vector: Sequence[float]) -> list[float]:
    """Scale ``vector`` to unit length; a zero vector stays zero."""
    norm = magnitude(vector)
    if norm == 0.0:
        return [0.0] * len(vector)
    return [value / norm for value in vector]


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))
    return sum(x * y for x, y in zip(a, b))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between ``a`` and ``b``, clamped to [-1, 1].

    Either side being a zero vector gives 0.0. Non-finite input yields NaN
    rather than a clamped score.
    """
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))
    similarity = dot_product(normalize(a), normalize(b))
    if math.isnan(similarity):
        return similarity
    return max(-1.0, min(1.0, similarity))
