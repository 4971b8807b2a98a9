from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from skillbloom.database import get_db
from skillbloom.models.mentor import Mentor
from skillbloom.models.success_story import SuccessStory
from skillbloom.schemas.community import MentorRead, SuccessStoryRead


router = APIRouter(tags=["community"])


def _norm(value: str) -> str:
    return (value or "").strip().lower()


@router.get("/mentors", response_model=list[MentorRead])
def list_mentors(
    specialty: str | None = Query(default=None, description="Case-insensitive substring match; \"all\" disables the filter"),
    db: Session = Depends(get_db),
) -> list[MentorRead]:
    query = db.query(Mentor)
    if specialty and _norm(specialty) not in ("", "all"):
        query = query.filter(func.lower(Mentor.specialty).like(f"%{_norm(specialty)}%"))
    rows = query.order_by(Mentor.rating.desc(), Mentor.id.asc()).all()
    return [MentorRead.model_validate(row) for row in rows]


@router.get("/mentors/{mentor_id}", response_model=MentorRead)
def read_mentor(mentor_id: int, db: Session = Depends(get_db)) -> MentorRead:
    mentor = db.query(Mentor).filter(Mentor.id == mentor_id).first()
    if not mentor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mentor not found")
    return MentorRead.model_validate(mentor)


@router.get("/success-stories", response_model=list[SuccessStoryRead])
def list_success_stories(
    business_type: str | None = Query(default=None, alias="businessType"),
    db: Session = Depends(get_db),
) -> list[SuccessStoryRead]:
    query = db.query(SuccessStory)
    if business_type and _norm(business_type) not in ("", "all"):
        query = query.filter(func.lower(SuccessStory.business_type) == _norm(business_type))
    rows = query.order_by(SuccessStory.id.asc()).all()
    return [SuccessStoryRead.model_validate(row) for row in rows]


@router.get("/success-stories/{story_id}", response_model=SuccessStoryRead)
def read_success_story(story_id: int, db: Session = Depends(get_db)) -> SuccessStoryRead:
    story = db.query(SuccessStory).filter(SuccessStory.id == story_id).first()
    if not story:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Success story not found")
    return SuccessStoryRead.model_validate(story)
