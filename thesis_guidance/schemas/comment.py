from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from thesis_guidance.models.comment import CommentType


class CommentCreate(BaseModel):
    guidance_session_id: int
    submission_id: Optional[int] = None
    sender_id: int
    receiver_id: Optional[int] = None
    content: str = Field(min_length=1)
    comment_type: CommentType


class CommentRead(BaseModel):
    id: int
    guidance_session_id: int
    submission_id: Optional[int]
    sender_id: int
    receiver_id: Optional[int]
    content: str
    comment_type: CommentType
    created_at: datetime

    class Config:
        from_attributes = True
