"""Exception types raised by semcat."""

from __future__ import annotations


class SemcatError(Exception):
    """Base exception for semcat."""


class ConfigurationMissingError(SemcatError):
    """Raised when the embedding provider has no credential configured."""


class EmbeddingUnavailableError(SemcatError):
    """Raised when the provider returns no usable vector for a text."""


class DimensionMismatchError(SemcatError, ValueError):
    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Vectors must have the same length (got {left} and {right})")
        self.left = left
        self.right = right
