from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.crud import comments as comments_crud
from thesis_guidance.crud import submissions as submissions_crud
from thesis_guidance.models.user import User
from thesis_guidance.schemas.comment import CommentRead
from thesis_guidance.schemas.submission import SubmissionCreate, SubmissionRead

router = APIRouter()


@router.post(
    "",
    response_model=SubmissionRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Guidance session or uploader does not exist"},
    },
)
def create_submission(
    payload: SubmissionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return submissions_crud.create_submission(db, payload)


@router.get("/{submission_id}", response_model=Optional[SubmissionRead])
def get_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return submissions_crud.get_submission(db, submission_id)


@router.delete("/{submission_id}", response_model=bool)
def delete_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return submissions_crud.delete_submission(db, submission_id)


@router.get("/{submission_id}/comments", response_model=list[CommentRead])
def list_submission_comments(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return comments_crud.list_comments_by_submission(db, submission_id)
