from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VerificationDetails(BaseModel):
    verified_at: datetime
    skill_level: int = Field(ge=1, le=5)
    feedback: str
    score: float = Field(ge=0, le=100)


class SkillCreate(BaseModel):
    category: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    level: int = Field(default=0, ge=0, le=5, description="Self-reported 0..5 (inclusive)")

    @field_validator("category", "name")
    @classmethod
    def _strip(cls, v: str) -> str:
        value = (v or "").strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class SkillUpdate(BaseModel):
    # Verification fields are not editable here; see /skills/verify.
    category: str | None = Field(default=None, min_length=1, max_length=100)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class SkillRead(BaseModel):
    id: int
    owner_id: int
    category: str
    name: str
    description: str | None = None
    level: int
    is_ai_suggested: bool = False
    is_verified: bool = False
    verification_date: datetime | None = None
    verification_details: VerificationDetails | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class SkillVerifyRequest(BaseModel):
    """Answers come inline or from a stored assessment, never both."""

    skill_id: int
    answers: dict[str, str] = Field(default_factory=dict)
    assessment_id: int | None = None

    @field_validator("answers", mode="before")
    @classmethod
    def _stringify_answers(cls, v):
        # Multiple-choice widgets may post lists; store them as a readable string.
        if isinstance(v, dict):
            out: dict[str, str] = {}
            for key, value in v.items():
                if isinstance(value, (list, tuple)):
                    out[str(key)] = ", ".join(str(item) for item in value)
                elif value is None:
                    out[str(key)] = ""
                else:
                    out[str(key)] = str(value)
            return out
        return v


class SkillVerifyResponse(BaseModel):
    skill: SkillRead
    verification_details: VerificationDetails
