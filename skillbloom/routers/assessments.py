from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skillbloom.database import get_db
from skillbloom.models.user import User
from skillbloom.routers.dependencies import get_collaborator, get_current_user, to_http_error
from skillbloom.schemas.assessment import AssessmentRead, AssessmentResult, AssessmentSubmitRequest
from skillbloom.schemas.suggestion import SkillSuggestionRead
from skillbloom.services.ai_client import SkillCollaborator
from skillbloom.services.errors import SkillBloomError
from skillbloom.services.suggestion_service import analyze_assessment, record_assessment


router = APIRouter(prefix="/assessments", tags=["assessments"])


@router.post("", response_model=AssessmentResult, status_code=status.HTTP_201_CREATED)
async def submit_assessment(
    payload: AssessmentSubmitRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    collaborator: SkillCollaborator = Depends(get_collaborator),
) -> AssessmentResult:
    try:
        # Stored before the AI call; the answers survive a provider outage.
        record = record_assessment(db, current_user.id, payload.responses, payload.skill_id)
        suggestions, analysis = await analyze_assessment(db, record, collaborator)
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc

    return AssessmentResult(
        assessment=AssessmentRead.model_validate(record),
        skill_suggestions=[SkillSuggestionRead.model_validate(s) for s in suggestions],
        business_insights=analysis.business_insights,
    )
