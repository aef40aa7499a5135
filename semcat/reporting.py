"""Rendering of classification results for the CLI."""

from __future__ import annotations

import json

from semcat.categories import CategoryRegistry
from semcat.models import ClassificationResult


def _limited(result: ClassificationResult, top: int | None) -> ClassificationResult:
    if top is None or top <= 0:
        return result
    return result.model_copy(update={"scores": result.scores[:top]})


def render_text(result: ClassificationResult, top: int | None = None) -> str:
    shown = _limited(result, top)
    lines = ["Classification results:"]
    lines.extend(f"{item.category_id}: {item.score:.4f}" for item in shown.scores)
    if result.top is not None:
        lines.append("")
        lines.append(f"Best matching category: {result.top.category_id} with score: {result.top.score:.4f}")
    return "\n".join(lines)


def render_json(result: ClassificationResult, top: int | None = None) -> str:
    shown = _limited(result, top)
    payload = {
        "model": result.model_id,
        "generated_at": result.generated_at.isoformat(),
        "top": result.top.model_dump() if result.top is not None else None,
        "scores": shown.as_dict(),
    }
    return json.dumps(payload, indent=2)


def render_categories(registry: CategoryRegistry, fmt: str = "text") -> str:
    if fmt == "json":
        return json.dumps(registry.as_dict(), indent=2)
    return "\n".join(f"{category.id}: {category.description}" for category in registry)
