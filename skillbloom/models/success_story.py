from sqlalchemy import Column, ForeignKey, Integer, JSON, String, Text
from skillbloom.database import Base


class SuccessStory(Base):
    __tablename__ = "success_stories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    image = Column(String(500), nullable=True)
    business_type = Column(String(100), nullable=False, index=True)
    tags = Column(JSON, nullable=False, default=list)
