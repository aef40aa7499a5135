"""Embedding-based classification of text against a category registry."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from semcat.categories import CategoryRegistry
from semcat.config import SemcatConfig, resolve_api_key
from semcat.embeddings.base import EmbeddingProvider
from semcat.embeddings.cache import CachingEmbeddingProvider
from semcat.embeddings.local_hash import LocalHashEmbeddingProvider
from semcat.embeddings.openai_compatible import OpenAICompatibleEmbeddingProvider
from semcat.models import ClassificationResult
from semcat.ranking import rank
from semcat.vector_math import cosine_similarity

logger = logging.getLogger(__name__)

EmbeddingPair = tuple[str | None, list[float]]


def provider_from_config(
    config: SemcatConfig,
    environ: Mapping[str, str] | None = None,
) -> EmbeddingProvider:
    emb = config.embedding
    provider: EmbeddingProvider
    if emb.provider == "local-hash":
        provider = LocalHashEmbeddingProvider(dimensions=emb.dimensions)
    else:
        provider = OpenAICompatibleEmbeddingProvider(
            api_key=resolve_api_key(config, environ),
            endpoint=emb.endpoint,
            model=emb.model,
            timeout_seconds=emb.timeout_seconds,
        )
    if config.classifier.cache_category_embeddings:
        provider = CachingEmbeddingProvider(provider)
    return provider


class Classifier:
    """Rank registry categories by cosine similarity to an input text.

    Every call fetches the input embedding and one embedding per category
    description, fanned out over a thread pool. The call is all-or-nothing: the
    first failed fetch is re-raised and no scores are returned. ``max_workers=1``
    fetches sequentially and yields the same ranking.
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        provider: EmbeddingProvider,
        *,
        max_workers: int = 8,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.registry = registry
        self.provider = provider
        self.max_workers = max_workers

    @classmethod
    def from_config(
        cls,
        config: SemcatConfig,
        *,
        provider: EmbeddingProvider | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Classifier:
        return cls(
            registry=CategoryRegistry.from_mapping(config.categories),
            provider=provider or provider_from_config(config, environ),
            max_workers=config.classifier.max_workers,
        )

    def classify(self, text: str) -> ClassificationResult:
        self.provider.ensure_configured()

        start = time.perf_counter()
        input_vector, category_vectors = self._fetch_embeddings(text)

        scores = {
            category.id: cosine_similarity(input_vector, category_vectors[category.id])
            for category in self.registry.entries()
        }
        result = rank(scores, model_id=self.provider.model_id())
        logger.info(
            "Classified text (%s chars) against %s categories: top=%s score=%.4f elapsed=%.2fs",
            len(text),
            len(self.registry),
            result.top_category,
            result.top_score,
            time.perf_counter() - start,
        )
        return result

    def _fetch_embeddings(self, text: str) -> tuple[list[float], dict[str, list[float]]]:
        jobs: list[tuple[str | None, str]] = [(None, text)]
        jobs.extend((category.id, category.description) for category in self.registry.entries())
        logger.debug("Fetching %s embeddings with up to %s workers", len(jobs), self.max_workers)

        pool = ThreadPoolExecutor(max_workers=min(self.max_workers, len(jobs)))
        try:
            futures = [pool.submit(self._fetch_one, key, job_text) for key, job_text in jobs]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            failed = [future for future in futures if future in done and future.exception() is not None]
            if failed:
                logger.debug("Abandoning %s pending embedding fetches after a failure", len(pending))
                # result() re-raises the fetch error
                failed[0].result()
            pairs = [future.result() for future in futures]
        finally:
            # In-flight fetches are not awaited; queued ones are cancelled and late results discarded.
            pool.shutdown(wait=False, cancel_futures=True)

        input_vector = pairs[0][1]
        category_vectors = {key: vector for key, vector in pairs[1:] if key is not None}
        return input_vector, category_vectors

    def _fetch_one(self, key: str | None, text: str) -> EmbeddingPair:
        return key, self.provider.embed_text(text)
