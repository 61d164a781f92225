from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    user_id: int
    student_id: str = Field(min_length=1, max_length=50)
    full_name: str = Field(min_length=1, max_length=255)
    phone: Optional[str] = None
    address: Optional[str] = None


class StudentRead(BaseModel):
    id: int
    user_id: int
    student_id: str
    full_name: str
    phone: Optional[str]
    address: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
