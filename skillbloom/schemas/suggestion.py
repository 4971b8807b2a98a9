from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _csv_list(v):
    # The onboarding forms post comma-separated text; accept both shapes.
    if v is None:
        return []
    if isinstance(v, str):
        return [part.strip() for part in v.split(",") if part.strip()]
    return v


class SkillSuggestionRequest(BaseModel):
    interests: list[str] = Field(default_factory=list)
    experience: list[str] = Field(default_factory=list)
    hobbies: list[str] = Field(default_factory=list)
    personality_traits: list[str] = Field(default_factory=list)
    demographics: str | None = None

    @field_validator("interests", "experience", "hobbies", "personality_traits", mode="before")
    @classmethod
    def _coerce_csv(cls, v):
        return _csv_list(v)


class SuggestedSkill(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    match_percentage: int = Field(ge=0, le=100)
    tags: list[str] = Field(default_factory=list)
    icon: str | None = None


class SkillSuggestionRead(SuggestedSkill):
    id: int
    user_id: int
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class BusinessSuggestionRequest(BaseModel):
    skills: list[str] = Field(default_factory=list)
    current_services: list[str] = Field(default_factory=list, alias="currentServices")
    # Cents, like listing prices.
    average_price: int | None = Field(default=None, ge=0, alias="averagePrice")
    sales_data: dict[str, Any] | None = Field(default=None, alias="salesData")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("skills", "current_services", mode="before")
    @classmethod
    def _coerce_csv(cls, v):
        return _csv_list(v)


class BusinessSuggestion(BaseModel):
    suggestion: str = Field(min_length=1)
    potential_increase: str
    actions: list[str] = Field(default_factory=list)
