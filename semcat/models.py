"""Core Pydantic domain models for semcat."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(min_length=1)
    description: str = Field(min_length=1)

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("category description must not be blank")
        return value


class CategoryScore(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    category_id: str
    score: float = Field(ge=-1.0, le=1.0)


class ClassificationResult(BaseModel):
    """Category scores ordered from best to worst match."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scores: tuple[CategoryScore, ...] = ()
    model_id: str = ""
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def top(self) -> CategoryScore | None:
        return self.scores[0] if self.scores else None

    @property
    def top_category(self) -> str | None:
        top = self.top
        return top.category_id if top is not None else None

    @property
    def top_score(self) -> float | None:
        top = self.top
        return top.score if top is not None else None

    def as_dict(self) -> dict[str, float]:
        return {item.category_id: item.score for item in self.scores}

    def __len__(self) -> int:
        return len(self.scores)
