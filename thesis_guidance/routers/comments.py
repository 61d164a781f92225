from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.crud import comments as comments_crud
from thesis_guidance.models.user import User
from thesis_guidance.schemas.comment import CommentCreate, CommentRead

router = APIRouter()


@router.post("", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
def create_comment(
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return comments_crud.create_comment(db, payload)


@router.delete("/{comment_id}", response_model=bool)
def delete_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return comments_crud.delete_comment(db, comment_id)
