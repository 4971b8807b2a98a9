# profile_service.py
from sqlalchemy import func
from sqlalchemy.orm import Session

from skillbloom.config import settings
from skillbloom.models.listing import Listing
from skillbloom.models.skill import Skill
from skillbloom.models.skill_suggestion import SkillSuggestion
from skillbloom.models.user import User
from skillbloom.schemas.dashboard import DashboardResponse
from skillbloom.schemas.skill import SkillRead
from skillbloom.schemas.user import UserRead


def profile_completion(user: User, *, fallback: int | None = None) -> int:
    """Stored completion percentage (0..100), or the configured fallback when never set."""
    value = user.profile_completion_percentage
    if value is None:
        return settings.profile_completion_fallback if fallback is None else fallback
    return max(0, min(100, int(value)))


def build_dashboard(db: Session, user: User) -> DashboardResponse:
    skills = db.query(Skill).filter(Skill.owner_id == user.id).order_by(Skill.created_at.asc(), Skill.id.asc()).all()
    listing_count = db.query(func.count(Listing.id)).filter(Listing.owner_id == user.id).scalar() or 0
    suggestion_count = (
        db.query(func.count(SkillSuggestion.id)).filter(SkillSuggestion.user_id == user.id).scalar() or 0
    )
    return DashboardResponse(
        user=UserRead.model_validate(user),
        profile_completion=profile_completion(user),
        skills=[SkillRead.model_validate(s) for s in skills],
        verified_skill_count=sum(1 for s in skills if s.is_verified),
        listing_count=int(listing_count),
        suggestion_count=int(suggestion_count),
    )
