from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from skillbloom.database import get_db
from skillbloom.models.skill import Skill
from skillbloom.models.user import User
from skillbloom.routers.dependencies import get_collaborator, require_homemaker, to_http_error
from skillbloom.schemas.assessment import AssessmentQuestionsResponse
from skillbloom.schemas.skill import SkillCreate, SkillRead, SkillUpdate, SkillVerifyRequest, SkillVerifyResponse, VerificationDetails
from skillbloom.services.ai_client import SkillCollaborator
from skillbloom.services.assessment_questions import get_assessment_questions, resolve_bucket
from skillbloom.services.errors import SkillBloomError, ValidationError
from skillbloom.services.skill_verification import get_owned_skill, load_assessment_answers, verify_skill
from skillbloom.services.suggestion_service import adopt_suggestion


router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("/assessment-questions", response_model=AssessmentQuestionsResponse)
def read_assessment_questions(
    category: str = Query(default="", description="Skill category, case-insensitive"),
) -> AssessmentQuestionsResponse:
    return AssessmentQuestionsResponse(
        category=category,
        bucket=resolve_bucket(category).value,
        questions=get_assessment_questions(category),
    )


@router.post("/verify", response_model=SkillVerifyResponse)
async def verify_my_skill(
    payload: SkillVerifyRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
    collaborator: SkillCollaborator = Depends(get_collaborator),
) -> SkillVerifyResponse:
    try:
        answers = payload.answers
        if answers and payload.assessment_id is not None:
            raise ValidationError(
                "Send either answers or assessment_id, not both",
                detail={"conflicting": ["answers", "assessment_id"]},
            )
        if not answers and payload.assessment_id is not None:
            answers = load_assessment_answers(
                db, payload.assessment_id, user_id=current_user.id, skill_id=payload.skill_id
            )
        skill, result = await verify_skill(
            db,
            skill_id=payload.skill_id,
            answers=answers,
            collaborator=collaborator,
            owner_id=current_user.id,
        )
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc

    return SkillVerifyResponse(
        skill=SkillRead.model_validate(skill),
        verification_details=VerificationDetails.model_validate(result.to_details()),
    )


@router.post("", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
def create_skill(
    payload: SkillCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
) -> SkillRead:
    skill = Skill(
        owner_id=current_user.id,
        category=payload.category,
        name=payload.name,
        description=payload.description,
        level=payload.level,
        is_verified=False,
    )
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return SkillRead.model_validate(skill)


@router.post("/suggestions/{suggestion_id}/adopt", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
def adopt_skill_suggestion(
    suggestion_id: int,
    category: str | None = Query(default=None, description="Override the inferred skill category"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
) -> SkillRead:
    try:
        skill = adopt_suggestion(db, suggestion_id, current_user.id, category)
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc
    return SkillRead.model_validate(skill)


@router.get("/{skill_id}", response_model=SkillRead)
def read_skill(skill_id: int, db: Session = Depends(get_db)) -> SkillRead:
    skill = db.query(Skill).filter(Skill.id == skill_id).first()
    if not skill:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return SkillRead.model_validate(skill)


@router.patch("/{skill_id}", response_model=SkillRead)
def update_skill(
    skill_id: int,
    payload: SkillUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
) -> SkillRead:
    try:
        skill = get_owned_skill(db, skill_id, current_user.id)
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc

    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(skill, field, value.strip() if isinstance(value, str) else value)
    db.commit()
    db.refresh(skill)
    return SkillRead.model_validate(skill)


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skill(
    skill_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
) -> None:
    try:
        skill = get_owned_skill(db, skill_id, current_user.id)
    except SkillBloomError as exc:
        raise to_http_error(exc) from exc
    db.delete(skill)
    db.commit()
