"""OpenAI-compatible embedding provider for API-based embeddings."""

from __future__ import annotations

import http.client
import json
import logging
import math
import numbers
import urllib.error
import urllib.request

from semcat.embeddings.base import clean_text
from semcat.errors import ConfigurationMissingError, EmbeddingUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.openai.com"
DEFAULT_MODEL = "text-embedding-3-small"


class OpenAICompatibleEmbeddingProvider:
    def __init__(
        self,
        api_key: str | None,
        endpoint: str = DEFAULT_ENDPOINT,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._api_key = api_key or ""
        self._endpoint = endpoint.rstrip("/")
        self._model = model
        self._timeout_seconds = timeout_seconds

    def model_id(self) -> str:
        return self._model

    def ensure_configured(self) -> None:
        if not self._api_key:
            raise ConfigurationMissingError("No API key configured for the embedding provider")

    def embed_text(self, text: str) -> list[float]:
        self.ensure_configured()
        payload = {"model": self._model, "input": clean_text(text)}
        req = urllib.request.Request(
            f"{self._endpoint}/v1/embeddings",
            data=json.dumps(payload).encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self._timeout_seconds) as response:
                body = json.loads(response.read().decode("utf-8"))
        except urllib.error.HTTPError as exc:
            raise EmbeddingUnavailableError(f"Embedding API returned HTTP {exc.code}") from exc
        except (OSError, http.client.HTTPException) as exc:
            raise EmbeddingUnavailableError(f"Embedding API request failed: {exc!r}") from exc
        except ValueError as exc:
            # undecodable bytes or invalid JSON
            raise EmbeddingUnavailableError("Embedding API returned an unreadable body") from exc

        vector = _first_vector(body)
        logger.debug("Embedded %s chars with %s (dims=%s)", len(text), self._model, len(vector))
        return vector


def _first_vector(body: object) -> list[float]:
    data = body.get("data") if isinstance(body, dict) else None
    if not data or not isinstance(data, list) or not isinstance(data[0], dict):
        raise EmbeddingUnavailableError("Failed to retrieve embeddings from the embedding API")

    embedding = data[0].get("embedding")
    if not embedding or not isinstance(embedding, list):
        raise EmbeddingUnavailableError("Embedding API returned an empty vector")
    if not all(isinstance(value, numbers.Real) and not isinstance(value, bool) for value in embedding):
        raise EmbeddingUnavailableError("Embedding API returned a non-numeric vector")
    try:
        vector = [float(value) for value in embedding]
    except OverflowError as exc:
        raise EmbeddingUnavailableError("Embedding API returned a vector with non-finite values") from exc
    if not all(math.isfinite(value) for value in vector):
        raise EmbeddingUnavailableError("Embedding API returned a vector with non-finite values")
    return vector
