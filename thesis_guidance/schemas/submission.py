from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SubmissionCreate(BaseModel):
    guidance_session_id: int
    file_name: str = Field(min_length=1, max_length=255)
    file_path: str = Field(min_length=1, max_length=1024)
    file_size: int = Field(ge=0)
    uploaded_by: int
    description: Optional[str] = None


class SubmissionRead(BaseModel):
    id: int
    guidance_session_id: int
    file_name: str
    file_path: str
    file_size: int
    uploaded_by: int
    description: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True
