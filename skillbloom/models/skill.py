# skill.py
from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from skillbloom.database import Base


class Skill(Base):
    __tablename__ = "skills"
    __table_args__ = (CheckConstraint("level >= 0 AND level <= 5", name="ck_skills_level_range"),)

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(String(100), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    level = Column(Integer, nullable=False, default=0)
    is_ai_suggested = Column(Boolean, nullable=False, default=False)

    # Only the verification workflow writes these three columns.
    is_verified = Column(Boolean, nullable=False, default=False)
    verification_date = Column(DateTime(timezone=True), nullable=True)
    # {verified_at, skill_level, feedback, score}
    verification_details = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    owner = relationship("User", back_populates="skills")
