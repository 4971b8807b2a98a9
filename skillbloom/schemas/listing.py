from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


ListingType = Literal["service", "product"]
ListingStatus = Literal["draft", "active", "inactive"]
ListingSort = Literal["featured", "newest", "price_low", "price_high"]


class ListingBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    price: int = Field(ge=0, description="Price in cents")
    type: ListingType = "service"
    category: str = Field(min_length=1, max_length=100)
    subcategory: str | None = None
    tags: list[str] = Field(default_factory=list)
    image: str | None = None
    location: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _clean_tags(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [str(t).strip() for t in v if str(t).strip()]


class ListingCreate(ListingBase):
    status: ListingStatus = "active"


class ListingUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: int | None = Field(default=None, ge=0)
    type: ListingType | None = None
    category: str | None = None
    subcategory: str | None = None
    tags: list[str] | None = None
    image: str | None = None
    location: str | None = None
    status: ListingStatus | None = None


class ListingRead(ListingBase):
    id: int
    owner_id: int
    is_featured: bool = False
    status: ListingStatus = "active"
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ListingCategoriesResponse(BaseModel):
    items: list[str]
