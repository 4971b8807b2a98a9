from sqlalchemy import Column, ForeignKey, Integer, String, Text
from skillbloom.database import Base


class Mentor(Base):
    __tablename__ = "mentors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    specialty = Column(String(255), nullable=False, index=True)
    bio = Column(Text, nullable=False)
    image = Column(String(500), nullable=True)
    rating = Column(Integer, nullable=True)
    mentee_count = Column(Integer, nullable=False, default=0)
    # Price per session in cents.
    session_price = Column(Integer, nullable=True)
