from __future__ import annotations

import logging
from typing import Any, Iterable

from sqlalchemy.orm import Session

from skillbloom.models.assessment_response import AssessmentResponse
from skillbloom.models.mentor import Mentor
from skillbloom.models.skill import Skill
from skillbloom.models.skill_suggestion import SkillSuggestion
from skillbloom.schemas.community import MentorRead, MentorRecommendation, MentorRecommendationRequest
from skillbloom.schemas.suggestion import BusinessSuggestion, BusinessSuggestionRequest, SkillSuggestionRequest, SuggestedSkill
from skillbloom.services.ai_client import AssessmentAnalysis, SkillCollaborator
from skillbloom.services.assessment_questions import resolve_bucket
from skillbloom.services.errors import NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


def save_suggestions(db: Session, user_id: int, suggestions: Iterable[SuggestedSkill]) -> list[SkillSuggestion]:
    rows = [
        SkillSuggestion(
            user_id=user_id,
            name=s.name,
            description=s.description,
            match_percentage=s.match_percentage,
            tags=list(s.tags),
            icon=s.icon,
        )
        for s in suggestions
    ]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows


async def generate_skill_suggestions(
    db: Session, user_id: int, request: SkillSuggestionRequest, collaborator: SkillCollaborator
) -> list[SkillSuggestion]:
    suggestions = await collaborator.suggest_skills(request.model_dump())
    logger.info("suggestions.generated user_id=%s count=%s", user_id, len(suggestions))
    return save_suggestions(db, user_id, suggestions)


def list_user_suggestions(db: Session, user_id: int) -> list[SkillSuggestion]:
    return (
        db.query(SkillSuggestion)
        .filter(SkillSuggestion.user_id == user_id)
        .order_by(SkillSuggestion.match_percentage.desc(), SkillSuggestion.id.asc())
        .all()
    )


def record_assessment(db: Session, user_id: int, responses: dict[str, Any], skill_id: int | None = None) -> AssessmentResponse:
    if skill_id is not None:
        skill = db.query(Skill).filter(Skill.id == skill_id).one_or_none()
        if skill is None:
            raise NotFoundError("Skill not found", detail={"skill_id": skill_id})
        if skill.owner_id != user_id:
            raise PermissionDeniedError("You can only assess your own skills", detail={"skill_id": skill_id})

    record = AssessmentResponse(user_id=user_id, skill_id=skill_id, responses=dict(responses), completed=True)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


async def analyze_assessment(
    db: Session, record: AssessmentResponse, collaborator: SkillCollaborator
) -> tuple[list[SkillSuggestion], AssessmentAnalysis]:
    analysis = await collaborator.analyze_assessment(record.responses or {})
    saved = save_suggestions(db, record.user_id, analysis.suggested_skills)
    logger.info("assessment.analyzed assessment_id=%s suggestions=%s", record.id, len(saved))
    return saved, analysis


def _category_for_suggestion(suggestion: SkillSuggestion) -> str:
    # Pick a catalog bucket from the suggestion's name or tags, falling back to "general".
    for text in [suggestion.name or ""] + [str(t) for t in (suggestion.tags or [])]:
        for word in text.lower().replace("&", " ").replace("-", " ").split():
            bucket = resolve_bucket(word)
            if bucket.value != "general":
                return word
    return "general"


def adopt_suggestion(db: Session, suggestion_id: int, user_id: int, category: str | None = None) -> Skill:
    suggestion = db.query(SkillSuggestion).filter(SkillSuggestion.id == suggestion_id).one_or_none()
    if suggestion is None or suggestion.user_id != user_id:
        raise NotFoundError("Skill suggestion not found", detail={"suggestion_id": suggestion_id})

    skill = Skill(
        owner_id=user_id,
        category=(category or "").strip() or _category_for_suggestion(suggestion),
        name=suggestion.name,
        description=suggestion.description,
        level=0,
        is_ai_suggested=True,
        is_verified=False,
    )
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return skill


async def suggest_business_growth(request: BusinessSuggestionRequest, collaborator: SkillCollaborator) -> BusinessSuggestion:
    suggestion = await collaborator.suggest_business_growth(request.model_dump())
    logger.info("business_suggestion.generated actions=%s", len(suggestion.actions))
    return suggestion


async def recommend_mentors(
    db: Session, request: MentorRecommendationRequest, collaborator: SkillCollaborator
) -> list[MentorRecommendation]:
    """Ask the collaborator to rank the stored mentors for this profile.

    Matches naming a mentor id that is not stored are dropped; the rest come
    back best match first.
    """

    mentors = db.query(Mentor).order_by(Mentor.id.asc()).all()
    if not mentors:
        return []

    by_id = {m.id: m for m in mentors}
    summaries = [{"id": m.id, "name": m.name, "specialty": m.specialty, "bio": m.bio} for m in mentors]
    matches = await collaborator.suggest_mentors(request.model_dump(), summaries)

    out: list[MentorRecommendation] = []
    seen: set[int] = set()
    for match in matches:
        mentor = by_id.get(match.id)
        if mentor is None or match.id in seen:
            logger.warning("mentor_match.skipped mentor_id=%s", match.id)
            continue
        seen.add(match.id)
        base = MentorRead.model_validate(mentor).model_dump()
        out.append(
            MentorRecommendation(**base, match_percentage=match.match_percentage, match_reason=match.match_reason)
        )
    out.sort(key=lambda r: -r.match_percentage)
    return out
