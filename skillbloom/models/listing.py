# listing.py
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from skillbloom.database import Base


LISTING_TYPES = ("service", "product")
LISTING_STATUSES = ("draft", "active", "inactive")


class Listing(Base):
    __tablename__ = "listings"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    # Stored in cents.
    price = Column(Integer, nullable=False)
    type = Column(String(20), nullable=False, default="service")
    category = Column(String(100), nullable=False, index=True)
    subcategory = Column(String(100), nullable=True)
    # Stored as list[str]
    tags = Column(JSON, nullable=False, default=list)
    image = Column(String(500), nullable=True)
    location = Column(String(255), nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default="active", index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    owner = relationship("User", back_populates="listings")
