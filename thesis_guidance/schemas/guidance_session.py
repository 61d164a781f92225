from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from thesis_guidance.db.base_class import as_utc


class GuidanceSessionCreate(BaseModel):
    thesis_id: int
    session_date: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("session_date")
    @classmethod
    def session_date_in_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # offsets are folded in; a date without one is read as UTC
        return as_utc(v) if v is not None else None


class GuidanceSessionNotesUpdate(BaseModel):
    notes: str


class GuidanceSessionRead(BaseModel):
    id: int
    thesis_id: int
    session_date: datetime
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
