from __future__ import annotations

from pydantic import BaseModel

from skillbloom.schemas.skill import SkillRead
from skillbloom.schemas.user import UserRead


class DashboardResponse(BaseModel):
    user: UserRead
    profile_completion: int
    skills: list[SkillRead]
    verified_skill_count: int
    listing_count: int
    suggestion_count: int
