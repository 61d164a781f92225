from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from thesis_guidance.models.thesis import ThesisStatus
from thesis_guidance.schemas.lecturer import LecturerRead
from thesis_guidance.schemas.student import StudentRead


class ThesisCreate(BaseModel):
    student_id: int
    title: str = Field(min_length=1, max_length=500)
    description: Optional[str] = None
    status: Optional[ThesisStatus] = None
    # first id becomes the primary supervisor
    lecturer_ids: list[int] = Field(min_length=1)

    @field_validator("lecturer_ids")
    @classmethod
    def lecturer_ids_unique(cls, v: list[int]) -> list[int]:
        if len(set(v)) != len(v):
            raise ValueError("lecturer_ids must not contain duplicates")
        return v


class ThesisUpdate(BaseModel):
    """
    Partial update. Only fields present in the payload are applied;
    `description: null` clears the description.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = None
    status: Optional[ThesisStatus] = None

    @field_validator("title", "status")
    @classmethod
    def not_null_when_given(cls, v):
        if v is None:
            raise ValueError("may be omitted but not set to null")
        return v


class ThesisRead(BaseModel):
    id: int
    student_id: int
    title: str
    description: Optional[str]
    status: ThesisStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ThesisLecturerRead(BaseModel):
    id: int
    thesis_id: int
    lecturer_id: int
    is_primary: bool
    created_at: datetime
    lecturer: LecturerRead

    class Config:
        from_attributes = True


class ThesisDetail(ThesisRead):
    student: StudentRead
    supervisors: list[ThesisLecturerRead]
