"""Deterministic ordering of category similarity scores."""

from __future__ import annotations

import math
from collections.abc import Mapping

from semcat.models import CategoryScore, ClassificationResult


def rank(scores: Mapping[str, float], *, model_id: str = "") -> ClassificationResult:
    """Order ``scores`` from highest to lowest.

    ``sorted`` is stable, so categories with exactly equal scores keep the
    mapping's insertion order.
    """
    for category_id, score in scores.items():
        if math.isnan(score):
            raise ValueError(f"score for {category_id} is NaN")

    ordered = sorted(scores.items(), key=lambda item: -item[1])
    return ClassificationResult(
        scores=tuple(CategoryScore(category_id=category_id, score=score) for category_id, score in ordered),
        model_id=model_id,
    )
