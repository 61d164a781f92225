import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from thesis_guidance.core.errors import Conflict, InvalidState, NotFound
from thesis_guidance.crud.users import get_user
from thesis_guidance.models.lecturer import Lecturer
from thesis_guidance.models.user import UserRole
from thesis_guidance.schemas.lecturer import LecturerCreate

logger = logging.getLogger(__name__)


def create_lecturer(db: Session, data: LecturerCreate) -> Lecturer:
    user = get_user(db, data.user_id)
    if not user:
        raise NotFound("User not found")
    if user.role != UserRole.LECTURER:
        raise InvalidState("User must have LECTURER role")

    if get_lecturer_by_user(db, data.user_id):
        raise Conflict("Lecturer profile already exists for this user")
    if db.query(Lecturer).filter(Lecturer.lecturer_id == data.lecturer_id).first():
        logger.warning("lecturer creation rejected: lecturer_id %r taken", data.lecturer_id)
        raise Conflict("Lecturer ID already exists")

    lecturer = Lecturer(
        user_id=data.user_id,
        lecturer_id=data.lecturer_id,
        full_name=data.full_name,
        phone=data.phone,
        specialization=data.specialization,
    )
    db.add(lecturer)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Lecturer ID already exists")

    db.refresh(lecturer)
    logger.info("created lecturer id=%s for user id=%s", lecturer.id, lecturer.user_id)
    return lecturer


def list_lecturers(db: Session) -> list[Lecturer]:
    return db.query(Lecturer).order_by(Lecturer.id.asc()).all()


def get_lecturer(db: Session, lecturer_id: int) -> Lecturer | None:
    return db.query(Lecturer).filter(Lecturer.id == lecturer_id).first()


def get_lecturer_by_user(db: Session, user_id: int) -> Lecturer | None:
    return db.query(Lecturer).filter(Lecturer.user_id == user_id).first()


def delete_lecturer(db: Session, lecturer_id: int) -> bool:
    lecturer = get_lecturer(db, lecturer_id)
    if not lecturer:
        return False

    db.delete(lecturer)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
