from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


UserRole = Literal["homemaker", "customer"]


def _validate_email_like(v: str) -> str:
    value = (v or "").strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value.lower()


class UserBase(BaseModel):
    email: str
    username: str = Field(min_length=3, max_length=100)
    role: UserRole = "homemaker"
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        return _validate_email_like(v)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, v: str) -> str:
        return (v or "").strip()


class UserCreate(UserBase):
    password: str = Field(min_length=8)


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserRead(UserBase):
    id: int
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_image: Optional[str] = None
    profile_completion_percentage: Optional[int] = None
    is_verified: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserPublic(BaseModel):
    """What other users may see: no email, no contact data."""

    id: int
    username: str
    role: UserRole
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_image: Optional[str] = None
    is_verified: bool = False

    model_config = ConfigDict(from_attributes=True)


class UserUpdate(BaseModel):
    # role and password are deliberately absent: they cannot change through profile edits.
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_image: Optional[str] = None
    profile_completion_percentage: Optional[int] = Field(default=None, ge=0, le=100)


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    user_id: int
