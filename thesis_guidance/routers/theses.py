from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.core.permissions import require_admin, require_role
from thesis_guidance.crud import guidance_sessions as sessions_crud
from thesis_guidance.crud import theses as theses_crud
from thesis_guidance.models.user import User, UserRole
from thesis_guidance.schemas.guidance_session import GuidanceSessionRead
from thesis_guidance.schemas.thesis import ThesisCreate, ThesisDetail, ThesisRead, ThesisUpdate

router = APIRouter()


@router.post("", response_model=ThesisRead, status_code=status.HTTP_201_CREATED)
def create_thesis(
    payload: ThesisCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return theses_crud.create_thesis(db, payload)


@router.get("", response_model=list[ThesisRead])
def list_theses(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return theses_crud.list_theses(db)


@router.get("/{thesis_id}", response_model=Optional[ThesisDetail])
def get_thesis(
    thesis_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return theses_crud.get_thesis(db, thesis_id)


@router.patch("/{thesis_id}", response_model=ThesisRead)
def update_thesis(
    thesis_id: int,
    payload: ThesisUpdate,
    db: Session = Depends(get_db),
    editor: User = Depends(require_role(UserRole.ADMIN, UserRole.LECTURER)),
):
    return theses_crud.update_thesis(db, thesis_id, payload)


@router.delete("/{thesis_id}", response_model=bool)
def delete_thesis(
    thesis_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return theses_crud.delete_thesis(db, thesis_id)


@router.get("/{thesis_id}/guidance-sessions", response_model=list[GuidanceSessionRead])
def list_thesis_guidance_sessions(
    thesis_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return sessions_crud.list_guidance_sessions_by_thesis(db, thesis_id)
