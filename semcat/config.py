"""Configuration models and loading for semcat."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from semcat.categories import DEFAULT_CATEGORIES
from semcat.embeddings.openai_compatible import DEFAULT_ENDPOINT, DEFAULT_MODEL

REPO_CONFIG_NAME = ".semcat.yaml"

# Mappings that replace rather than merge when overridden.
_REPLACE_KEYS = frozenset({"categories"})


class EmbeddingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    provider: Literal["openai-compatible", "local-hash"] = "openai-compatible"
    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    dimensions: int = Field(default=256, gt=0)
    api_key_env: str = "OPENAI_API_KEY"
    timeout_seconds: float = Field(default=10.0, gt=0)


class ClassifierConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_workers: int = Field(default=8, ge=1)
    cache_category_embeddings: bool = False


class SemcatConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    categories: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_CATEGORIES), min_length=1)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if key not in _REPLACE_KEYS and isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must decode to a mapping")
    return data


def load_effective_config(
    repo_path: str | Path = ".",
    org_defaults: dict[str, Any] | None = None,
    system_defaults: dict[str, Any] | None = None,
    runtime_override: dict[str, Any] | None = None,
) -> SemcatConfig:
    """Load config with precedence runtime > repo .semcat.yaml > org > system."""
    repo_config = _load_yaml(Path(repo_path) / REPO_CONFIG_NAME)

    merged: dict[str, Any] = {}
    for layer in (system_defaults, org_defaults, repo_config, runtime_override):
        if layer:
            merged = _deep_merge(merged, layer)

    return SemcatConfig.model_validate(merged)


def resolve_api_key(config: SemcatConfig, environ: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if environ is None else environ
    value = env.get(config.embedding.api_key_env, "").strip()
    return value or None
