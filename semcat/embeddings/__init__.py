"""Embedding provider interfaces and implementations."""

from .base import EmbeddingProvider, clean_text
from .cache import CachingEmbeddingProvider
from .local_hash import LocalHashEmbeddingProvider
from .openai_compatible import OpenAICompatibleEmbeddingProvider

__all__ = [
    "EmbeddingProvider",
    "clean_text",
    "CachingEmbeddingProvider",
    "LocalHashEmbeddingProvider",
    "OpenAICompatibleEmbeddingProvider",
]
