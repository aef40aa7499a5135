"""Embedding-based text classification against described categories."""

from semcat.categories import DEFAULT_CATEGORIES, CategoryRegistry
from semcat.classifier import Classifier
from semcat.models import Category, CategoryScore, ClassificationResult

__all__ = [
    "DEFAULT_CATEGORIES",
    "Category",
    "CategoryRegistry",
    "CategoryScore",
    "ClassificationResult",
    "Classifier",
]
