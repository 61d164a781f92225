from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class LecturerCreate(BaseModel):
    user_id: int
    lecturer_id: str = Field(min_length=1, max_length=50)
    full_name: str = Field(min_length=1, max_length=255)
    phone: Optional[str] = None
    specialization: Optional[str] = None


class LecturerRead(BaseModel):
    id: int
    user_id: int
    lecturer_id: str
    full_name: str
    phone: Optional[str]
    specialization: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
