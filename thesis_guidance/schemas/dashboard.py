from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from thesis_guidance.models.user import UserRole
from thesis_guidance.schemas.lecturer import LecturerRead
from thesis_guidance.schemas.student import StudentRead
from thesis_guidance.schemas.thesis import ThesisRead
from thesis_guidance.schemas.user import UserRead


class StudentDashboard(BaseModel):
    role: Literal[UserRole.STUDENT] = UserRole.STUDENT
    user: UserRead
    profile: Optional[StudentRead] = None
    theses: list[ThesisRead] = []


class LecturerDashboard(BaseModel):
    role: Literal[UserRole.LECTURER] = UserRole.LECTURER
    user: UserRead
    profile: Optional[LecturerRead] = None
    theses: list[ThesisRead] = []


class AdminDashboard(BaseModel):
    role: Literal[UserRole.ADMIN] = UserRole.ADMIN
    user: UserRead
    students: list[StudentRead] = []
    lecturers: list[LecturerRead] = []
    theses: list[ThesisRead] = []


Dashboard = Annotated[
    Union[StudentDashboard, LecturerDashboard, AdminDashboard],
    Field(discriminator="role"),
]
