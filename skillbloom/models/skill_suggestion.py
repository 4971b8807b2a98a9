from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.sql import func

from skillbloom.database import Base


class SkillSuggestion(Base):
    __tablename__ = "skill_suggestions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    match_percentage = Column(Integer, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    # Remix icon name, e.g. "ri-restaurant-line"
    icon = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
