from __future__ import annotations

import asyncio
import logging
from typing import Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillbloom.config import settings
from skillbloom.models.assessment_response import AssessmentResponse
from skillbloom.models.skill import Skill
from skillbloom.services.ai_client import SkillCollaborator, VerificationResult, parse_verification_payload
from skillbloom.services.assessment_questions import REQUIRED_QUESTION_IDS, question_ids
from skillbloom.services.errors import (
    CollaboratorError,
    CollaboratorTimeoutError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def get_owned_skill(db: Session, skill_id: int, owner_id: int | None = None) -> Skill:
    skill = db.query(Skill).filter(Skill.id == skill_id).one_or_none()
    if skill is None:
        raise NotFoundError("Skill not found", detail={"skill_id": skill_id})
    if owner_id is not None and skill.owner_id != owner_id:
        raise PermissionDeniedError("You don't own this skill", detail={"skill_id": skill_id})
    return skill


def validate_answers(category: str, answers: Mapping[str, str]) -> dict[str, str]:
    """Check answers against the category's question set.

    Returns the answers as strings with surrounding whitespace removed. Required common
    questions must be present and non-blank; ids outside the question set are
    rejected.
    """

    if not answers:
        raise ValidationError("Assessment answers are required", detail={"missing": list(REQUIRED_QUESTION_IDS)})

    cleaned = {str(k).strip(): ("" if v is None else str(v)).strip() for k, v in answers.items()}
    allowed = set(question_ids(category))

    missing = [qid for qid in REQUIRED_QUESTION_IDS if not cleaned.get(qid)]
    unknown = sorted(k for k in cleaned if k not in allowed)
    if missing or unknown:
        detail: dict[str, list[str]] = {}
        if missing:
            detail["missing"] = missing
        if unknown:
            detail["unknown"] = unknown
        raise ValidationError("Assessment answers are incomplete or invalid", detail=detail)
    return cleaned


def load_assessment_answers(db: Session, assessment_id: int, *, user_id: int, skill_id: int) -> dict[str, str]:
    """Answers from a previously submitted assessment, for verify-by-reference."""

    record = db.query(AssessmentResponse).filter(AssessmentResponse.id == assessment_id).one_or_none()
    if record is None or record.user_id != user_id:
        raise NotFoundError("Assessment not found", detail={"assessment_id": assessment_id})
    if record.skill_id is not None and record.skill_id != skill_id:
        raise ValidationError(
            "Assessment belongs to a different skill",
            detail={"assessment_id": assessment_id, "skill_id": record.skill_id},
        )
    responses = record.responses or {}
    return {str(k): "" if v is None else str(v) for k, v in responses.items()}


def _checked(result: VerificationResult) -> VerificationResult:
    # Stubs and alternative collaborators may bypass the HTTP parser.
    if not isinstance(result, VerificationResult):
        raise CollaboratorError("AI collaborator returned an unexpected result type")
    return parse_verification_payload(
        {"skill_level": result.skill_level, "score": result.score, "feedback": result.feedback},
        verified_at=result.verified_at,
    )


async def verify_skill(
    db: Session,
    *,
    skill_id: int,
    answers: Mapping[str, str],
    collaborator: SkillCollaborator,
    owner_id: int | None = None,
    timeout: float | None = None,
) -> tuple[Skill, VerificationResult]:
    """Score assessment answers with the AI collaborator and mark the skill verified.

    All-or-nothing: the skill row is written only after a complete, valid
    result has arrived. Repeating the call overwrites the previous
    verification (last write wins). Without an explicit `timeout` the
    collaborator gets `settings.ai_timeout_seconds`.
    """

    skill = get_owned_skill(db, skill_id, owner_id)
    category = skill.category
    skill_name = skill.name
    cleaned = validate_answers(category, answers)

    if timeout is None:
        timeout = settings.ai_timeout_seconds

    logger.info("skill.verify start skill_id=%s category=%s", skill_id, category)
    try:
        call = collaborator.verify_skill(category=category, skill_name=skill_name, answers=cleaned)
        raw = await asyncio.wait_for(call, timeout)
    except asyncio.TimeoutError as exc:
        logger.warning("skill.verify timeout skill_id=%s timeout=%s", skill_id, timeout)
        raise CollaboratorTimeoutError("AI verification timed out", detail={"timeout_seconds": timeout}) from exc
    except CollaboratorError:
        logger.warning("skill.verify collaborator_error skill_id=%s", skill_id)
        raise
    except Exception as exc:  # noqa: BLE001 - any collaborator failure is a CollaboratorError
        logger.warning("skill.verify collaborator_failure skill_id=%s error=%s", skill_id, type(exc).__name__)
        raise CollaboratorError("AI verification failed") from exc

    result = _checked(raw)

    skill.level = result.skill_level
    skill.is_verified = True
    skill.verification_date = result.verified_at
    skill.verification_details = result.to_details()
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("skill.verify persistence_error skill_id=%s", skill_id)
        raise PersistenceError("Could not save verification result", detail={"skill_id": skill_id}) from exc

    db.refresh(skill)
    logger.info("skill.verify done skill_id=%s level=%s score=%s", skill_id, result.skill_level, result.score)
    return skill, result
