from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skillbloom.schemas.suggestion import SkillSuggestionRead


QuestionType = Literal["text", "multiple_choice"]


class AssessmentQuestion(BaseModel):
    id: str
    question: str
    type: QuestionType = "text"
    options: list[str] | None = None

    @model_validator(mode="after")
    def _options_only_for_multiple_choice(self) -> "AssessmentQuestion":
        if self.type == "multiple_choice" and not self.options:
            raise ValueError("multiple_choice questions need options")
        if self.type == "text" and self.options is not None:
            raise ValueError("text questions cannot carry options")
        return self


class AssessmentQuestionsResponse(BaseModel):
    category: str
    bucket: str
    questions: list[AssessmentQuestion]


class AssessmentSubmitRequest(BaseModel):
    skill_id: int | None = None
    responses: dict[str, Any] = Field(min_length=1)


class AssessmentRead(BaseModel):
    id: int
    user_id: int
    skill_id: int | None = None
    responses: dict[str, Any]
    completed: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class AssessmentResult(BaseModel):
    assessment: AssessmentRead
    skill_suggestions: list[SkillSuggestionRead] = Field(default_factory=list)
    business_insights: str = ""
