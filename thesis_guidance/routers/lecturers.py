from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.core.permissions import require_admin
from thesis_guidance.crud import lecturers as lecturers_crud
from thesis_guidance.crud import theses as theses_crud
from thesis_guidance.models.user import User
from thesis_guidance.schemas.lecturer import LecturerCreate, LecturerRead
from thesis_guidance.schemas.thesis import ThesisRead

router = APIRouter()


@router.post("", response_model=LecturerRead, status_code=status.HTTP_201_CREATED)
def create_lecturer(
    payload: LecturerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return lecturers_crud.create_lecturer(db, payload)


@router.get("", response_model=list[LecturerRead])
def list_lecturers(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return lecturers_crud.list_lecturers(db)


@router.get("/by-user/{user_id}", response_model=Optional[LecturerRead])
def get_lecturer_by_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return lecturers_crud.get_lecturer_by_user(db, user_id)


@router.get("/{lecturer_id}", response_model=Optional[LecturerRead])
def get_lecturer(
    lecturer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return lecturers_crud.get_lecturer(db, lecturer_id)


@router.get("/{lecturer_id}/theses", response_model=list[ThesisRead])
def list_lecturer_theses(
    lecturer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return theses_crud.list_theses_by_lecturer(db, lecturer_id)


@router.delete("/{lecturer_id}", response_model=bool)
def delete_lecturer(
    lecturer_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return lecturers_crud.delete_lecturer(db, lecturer_id)
