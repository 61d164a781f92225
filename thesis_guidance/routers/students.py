from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.core.permissions import require_admin
from thesis_guidance.crud import students as students_crud
from thesis_guidance.crud import theses as theses_crud
from thesis_guidance.models.user import User
from thesis_guidance.schemas.student import StudentCreate, StudentRead
from thesis_guidance.schemas.thesis import ThesisRead

router = APIRouter()


@router.post("", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return students_crud.create_student(db, payload)


@router.get("", response_model=list[StudentRead])
def list_students(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return students_crud.list_students(db)


@router.get("/by-user/{user_id}", response_model=Optional[StudentRead])
def get_student_by_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return students_crud.get_student_by_user(db, user_id)


@router.get("/{student_id}", response_model=Optional[StudentRead])
def get_student(
    student_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return students_crud.get_student(db, student_id)


@router.get("/{student_id}/theses", response_model=list[ThesisRead])
def list_student_theses(
    student_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return theses_crud.list_theses_by_student(db, student_id)


@router.delete("/{student_id}", response_model=bool)
def delete_student(
    student_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return students_crud.delete_student(db, student_id)
