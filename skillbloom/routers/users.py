# users.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from skillbloom.database import get_db
from skillbloom.models.listing import Listing
from skillbloom.models.skill import Skill
from skillbloom.models.user import User
from skillbloom.routers.dependencies import get_current_user
from skillbloom.schemas.dashboard import DashboardResponse
from skillbloom.schemas.listing import ListingRead
from skillbloom.schemas.skill import SkillRead
from skillbloom.schemas.suggestion import SkillSuggestionRead
from skillbloom.schemas.user import UserPublic, UserRead, UserUpdate
from skillbloom.services.profile_service import build_dashboard
from skillbloom.services.suggestion_service import list_user_suggestions


router = APIRouter()


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.put("/me", response_model=UserRead)
def update_current_user(update: UserUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> UserRead:
    update_data = update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(current_user, field, value)
    db.add(current_user)
    db.commit()
    db.refresh(current_user)
    return UserRead.model_validate(current_user)


@router.get("/me/dashboard", response_model=DashboardResponse)
def read_my_dashboard(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> DashboardResponse:
    return build_dashboard(db, current_user)


@router.get("/{user_id}", response_model=UserPublic)
def read_user(user_id: int, db: Session = Depends(get_db)) -> UserPublic:
    return UserPublic.model_validate(_get_user_or_404(db, user_id))


@router.get("/{user_id}/skills", response_model=list[SkillRead])
def read_user_skills(user_id: int, db: Session = Depends(get_db)) -> list[SkillRead]:
    _get_user_or_404(db, user_id)
    rows = db.query(Skill).filter(Skill.owner_id == user_id).order_by(Skill.id.asc()).all()
    return [SkillRead.model_validate(row) for row in rows]


@router.get("/{user_id}/skill-suggestions", response_model=list[SkillSuggestionRead])
def read_user_skill_suggestions(user_id: int, db: Session = Depends(get_db)) -> list[SkillSuggestionRead]:
    _get_user_or_404(db, user_id)
    return [SkillSuggestionRead.model_validate(row) for row in list_user_suggestions(db, user_id)]


@router.get("/{user_id}/listings", response_model=list[ListingRead])
def read_user_listings(user_id: int, db: Session = Depends(get_db)) -> list[ListingRead]:
    # All statuses, newest first.
    _get_user_or_404(db, user_id)
    rows = (
        db.query(Listing)
        .filter(Listing.owner_id == user_id)
        .order_by(Listing.created_at.desc(), Listing.id.desc())
        .all()
    )
    return [ListingRead.model_validate(row) for row in rows]
