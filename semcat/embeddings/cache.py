"""In-process embedding cache keyed by cleaned text."""

from __future__ import annotations

import logging
import threading

from semcat.embeddings.base import EmbeddingProvider, clean_text

logger = logging.getLogger(__name__)


class CachingEmbeddingProvider:
    """Wrap a provider and reuse vectors for texts already embedded.

    Failed fetches are not cached. Two threads racing on the same uncached text
    may both call the wrapped provider; the first stored vector wins.
    """

    def __init__(self, inner: EmbeddingProvider) -> None:
        self._inner = inner
        self._vectors: dict[str, list[float]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def model_id(self) -> str:
        return self._inner.model_id()

    def ensure_configured(self) -> None:
        self._inner.ensure_configured()

    def embed_text(self, text: str) -> list[float]:
        key = clean_text(text)
        with self._lock:
            cached = self._vectors.get(key)
            if cached is not None:
                self.hits += 1
                return list(cached)
            self.misses += 1

        vector = self._inner.embed_text(text)
        with self._lock:
            stored = self._vectors.setdefault(key, list(vector))
        return list(stored)

    def cache_size(self) -> int:
        with self._lock:
            return len(self._vectors)

    def clear(self) -> None:
        with self._lock:
            self._vectors.clear()
        logger.debug("Embedding cache cleared")
