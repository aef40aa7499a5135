"""Deterministic offline embedding provider based on feature hashing."""

from __future__ import annotations

import hashlib
import re

from semcat.embeddings.base import clean_text

_WORD_RE = re.compile(r"[a-zA-Z0-9_]+")


class LocalHashEmbeddingProvider:
    """Signed hashing of lower-cased words into a fixed number of buckets.

    Needs no credential, so it always reports itself configured. Useful for
    demos and tests; scores only reflect shared vocabulary.
    """

    def __init__(self, dimensions: int = 256, model: str = "local-hash-v1") -> None:
        if dimensions <= 0:
            raise ValueError("dimensions must be positive")
        self._dimensions = dimensions
        self._model = model

    def model_id(self) -> str:
        return self._model

    def dimensions(self) -> int:
        return self._dimensions

    def ensure_configured(self) -> None:
        return None

    def embed_text(self, text: str) -> list[float]:
        vector = [0.0] * self._dimensions
        for word in _WORD_RE.findall(clean_text(text).lower()):
            bucket, sign = self._slot(word)
            vector[bucket] += sign
        return vector

    def _slot(self, word: str) -> tuple[int, float]:
        digest = hashlib.blake2b(word.encode("utf-8"), digest_size=8).digest()
        value = int.from_bytes(digest, "big")
        return value % self._dimensions, (1.0 if value >> 63 == 0 else -1.0)
