from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from thesis_guidance.models.user import UserRole


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=150)
    email: EmailStr
    password: str = Field(min_length=6)
    role: UserRole


class UserRead(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: int
    username: str
    email: EmailStr
    role: UserRole
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
