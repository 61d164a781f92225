from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.crud import lecturers as lecturers_crud
from thesis_guidance.crud import students as students_crud
from thesis_guidance.crud import theses as theses_crud
from thesis_guidance.models.user import User, UserRole
from thesis_guidance.schemas.dashboard import (
    AdminDashboard,
    Dashboard,
    LecturerDashboard,
    StudentDashboard,
)

router = APIRouter(tags=["dashboard"])


def _student_dashboard(db: Session, me: User) -> StudentDashboard:
    profile = students_crud.get_student_by_user(db, me.id)
    theses = theses_crud.list_theses_by_student(db, profile.id) if profile else []
    return StudentDashboard.model_validate(
        {"user": me, "profile": profile, "theses": theses}, from_attributes=True
    )


def _lecturer_dashboard(db: Session, me: User) -> LecturerDashboard:
    profile = lecturers_crud.get_lecturer_by_user(db, me.id)
    theses = theses_crud.list_theses_by_lecturer(db, profile.id) if profile else []
    return LecturerDashboard.model_validate(
        {"user": me, "profile": profile, "theses": theses}, from_attributes=True
    )


def _admin_dashboard(db: Session, me: User) -> AdminDashboard:
    return AdminDashboard.model_validate(
        {
            "user": me,
            "students": students_crud.list_students(db),
            "lecturers": lecturers_crud.list_lecturers(db),
            "theses": theses_crud.list_theses(db),
        },
        from_attributes=True,
    )


_BUILDERS = {
    UserRole.STUDENT: _student_dashboard,
    UserRole.LECTURER: _lecturer_dashboard,
    UserRole.ADMIN: _admin_dashboard,
}


@router.get("/me/dashboard", response_model=Dashboard)
def my_dashboard(
    db: Session = Depends(get_db),
    me: User = Depends(get_current_user),
):
    # role is resolved once here; each builder only knows its own view
    return _BUILDERS[me.role](db, me)
