from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillbloom.database import get_db
from skillbloom.models.user import User
from skillbloom.routers.dependencies import get_collaborator, get_current_user, to_http_error
from skillbloom.schemas.community import MentorRecommendation, MentorRecommendationRequest
from skillbloom.schemas.suggestion import BusinessSuggestion, BusinessSuggestionRequest, SkillSuggestionRead, SkillSuggestionRequest
from skillbloom.services.ai_client import SkillCollaborator
from skillbloom.services.errors import SkillBloomError
from skillbloom.services.suggestion_service import generate_skill_suggestions, recommend_mentors, suggest_business_growth


router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/skill-suggestions", response_model=list[SkillSuggestionRead])
async def create_skill_suggestions(
    payload: SkillSuggestionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    collaborator: SkillCollaborator = Depends(get_collaborator),
) -> list[SkillSuggestionRead]:
    try:
        rows = await generate_skill_suggestions(db, current_user.id, payload, collaborator)
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc
    return [SkillSuggestionRead.model_validate(row) for row in rows]


@router.post("/business-suggestions", response_model=BusinessSuggestion)
async def create_business_suggestion(
    payload: BusinessSuggestionRequest,
    current_user: User = Depends(get_current_user),
    collaborator: SkillCollaborator = Depends(get_collaborator),
) -> BusinessSuggestion:
    try:
        return await suggest_business_growth(payload, collaborator)
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc


@router.post("/mentor-recommendations", response_model=list[MentorRecommendation])
async def create_mentor_recommendations(
    payload: MentorRecommendationRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    collaborator: SkillCollaborator = Depends(get_collaborator),
) -> list[MentorRecommendation]:
    try:
        return await recommend_mentors(db, payload, collaborator)
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc
