"""Embedding provider abstractions."""

from __future__ import annotations

from typing import Protocol


def clean_text(text: str) -> str:
    """Replace line breaks with spaces before a text is embedded."""
    return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


class EmbeddingProvider(Protocol):
    def model_id(self) -> str:
        ...

    def ensure_configured(self) -> None:
        ...

    def embed_text(self, text: str) -> list[float]:
        ...
