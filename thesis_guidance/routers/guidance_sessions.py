from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.crud import comments as comments_crud
from thesis_guidance.crud import guidance_sessions as sessions_crud
from thesis_guidance.crud import submissions as submissions_crud
from thesis_guidance.models.user import User
from thesis_guidance.schemas.comment import CommentRead
from thesis_guidance.schemas.guidance_session import (
    GuidanceSessionCreate,
    GuidanceSessionNotesUpdate,
    GuidanceSessionRead,
)
from thesis_guidance.schemas.submission import SubmissionRead

router = APIRouter()


@router.post("", response_model=GuidanceSessionRead, status_code=status.HTTP_201_CREATED)
def create_guidance_session(
    payload: GuidanceSessionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return sessions_crud.create_guidance_session(db, payload)


@router.get("/{session_id}", response_model=Optional[GuidanceSessionRead])
def get_guidance_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return sessions_crud.get_guidance_session(db, session_id)


@router.patch("/{session_id}", response_model=GuidanceSessionRead)
def update_guidance_session(
    session_id: int,
    payload: GuidanceSessionNotesUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return sessions_crud.update_guidance_session_notes(db, session_id, payload.notes)


@router.delete("/{session_id}", response_model=bool)
def delete_guidance_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return sessions_crud.delete_guidance_session(db, session_id)


@router.get("/{session_id}/submissions", response_model=list[SubmissionRead])
def list_session_submissions(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return submissions_crud.list_submissions_by_session(db, session_id)


@router.get("/{session_id}/comments", response_model=list[CommentRead])
def list_session_comments(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return comments_crud.list_comments_by_session(db, session_id)
