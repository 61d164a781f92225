import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from thesis_guidance.core.errors import Conflict, InvalidState, NotFound
from thesis_guidance.crud.users import get_user
from thesis_guidance.models.student import Student
from thesis_guidance.models.user import UserRole
from thesis_guidance.schemas.student import StudentCreate

logger = logging.getLogger(__name__)


def create_student(db: Session, data: StudentCreate) -> Student:
    user = get_user(db, data.user_id)
    if not user:
        raise NotFound("User not found")
    if user.role != UserRole.STUDENT:
        raise InvalidState("User must have STUDENT role")

    if get_student_by_user(db, data.user_id):
        raise Conflict("Student profile already exists for this user")
    if db.query(Student).filter(Student.student_id == data.student_id).first():
        logger.warning("student creation rejected: student_id %r taken", data.student_id)
        raise Conflict("Student ID already exists")

    student = Student(
        user_id=data.user_id,
        student_id=data.student_id,
        full_name=data.full_name,
        phone=data.phone,
        address=data.address,
    )
    db.add(student)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Student ID already exists")

    db.refresh(student)
    logger.info("created student id=%s for user id=%s", student.id, student.user_id)
    return student


def list_students(db: Session) -> list[Student]:
    return db.query(Student).order_by(Student.id.asc()).all()


def get_student(db: Session, student_id: int) -> Student | None:
    return db.query(Student).filter(Student.id == student_id).first()


def get_student_by_user(db: Session, user_id: int) -> Student | None:
    return db.query(Student).filter(Student.user_id == user_id).first()


def delete_student(db: Session, student_id: int) -> bool:
    student = get_student(db, student_id)
    if not student:
        return False

    db.delete(student)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
