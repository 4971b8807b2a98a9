from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MentorRead(BaseModel):
    id: int
    user_id: int | None = None
    name: str
    specialty: str
    bio: str
    image: str | None = None
    rating: int | None = None
    mentee_count: int = 0
    session_price: int | None = None

    model_config = ConfigDict(from_attributes=True)


class SuccessStoryRead(BaseModel):
    id: int
    user_id: int | None = None
    name: str
    title: str
    content: str
    image: str | None = None
    business_type: str
    tags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class MentorRecommendationRequest(BaseModel):
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)

    @field_validator("skills", "interests", "goals", mode="before")
    @classmethod
    def _coerce_csv(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v


class MentorMatch(BaseModel):
    id: int
    match_percentage: int = Field(ge=0, le=100)
    match_reason: str = ""


class MentorRecommendation(MentorRead):
    match_percentage: int
    match_reason: str
