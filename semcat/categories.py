"""Fixed category registry used for classification."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from semcat.models import Category

DEFAULT_CATEGORIES: dict[str, str] = {
    "ease_of_use": (
        "How intuitive and user-friendly the product is. Includes navigation flow, "
        "clarity of UI elements, and minimal learning curve."
    ),
    "functionality": (
        "How well the product performs its core functions. Includes feature completeness, "
        "reliability, and performance."
    ),
    "ease_of_setup": (
        "How simple it is to install, configure, and get started with the product. "
        "Includes documentation quality and initial onboarding."
    ),
    "look_and_feel": (
        "The visual appeal and aesthetic quality of the interface. Includes design "
        "consistency, visual hierarchy, and emotional response."
    ),
}


class CategoryRegistry:
    """Immutable, insertion-ordered set of categories.

    Iteration order only drives the fetch fan-out and the tie-break of equal
    scores; result order is decided by ranking.
    """

    __slots__ = ("_entries", "_by_id")

    def __init__(self, categories: Iterable[Category]) -> None:
        entries = tuple(categories)
        if not entries:
            raise ValueError("category registry requires at least one category")
        by_id: dict[str, Category] = {}
        for category in entries:
            if category.id in by_id:
                raise ValueError(f"duplicate category id: {category.id}")
            by_id[category.id] = category
        self._entries = entries
        self._by_id = by_id

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> CategoryRegistry:
        return cls(Category(id=key, description=value) for key, value in mapping.items())

    @classmethod
    def default(cls) -> CategoryRegistry:
        return cls.from_mapping(DEFAULT_CATEGORIES)

    def entries(self) -> tuple[Category, ...]:
        return self._entries

    def ids(self) -> list[str]:
        return [category.id for category in self._entries]

    def description(self, category_id: str) -> str:
        try:
            return self._by_id[category_id].description
        except KeyError:
            raise KeyError(f"unknown category: {category_id}") from None

    def as_dict(self) -> dict[str, str]:
        return {category.id: category.description for category in self._entries}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._entries)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def __repr__(self) -> str:
        return f"CategoryRegistry({self.ids()!r})"
