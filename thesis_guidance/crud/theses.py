import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from thesis_guidance.core.errors import NotFound, ReferentialIntegrityViolation
from thesis_guidance.crud.students import get_student
from thesis_guidance.db.base_class import touch
from thesis_guidance.models.lecturer import Lecturer
from thesis_guidance.models.thesis import Thesis, ThesisLecturer, ThesisStatus
from thesis_guidance.schemas.thesis import ThesisCreate, ThesisUpdate

logger = logging.getLogger(__name__)


def _ensure_lecturers_exist(db: Session, lecturer_ids: list[int]) -> None:
    found = {
        row.id for row in db.query(Lecturer.id).filter(Lecturer.id.in_(lecturer_ids)).all()
    }
    missing = [lid for lid in lecturer_ids if lid not in found]
    if missing:
        raise NotFound(f"Lecturer not found: {', '.join(str(m) for m in missing)}")


def create_thesis(db: Session, data: ThesisCreate) -> Thesis:
    """
    Create a thesis and its supervisor links in one transaction.

    The first lecturer in `lecturer_ids` is the primary supervisor. If any
    link fails to insert, the thesis row is rolled back with it.
    """
    if not get_student(db, data.student_id):
        raise NotFound("Student not found")
    _ensure_lecturers_exist(db, data.lecturer_ids)

    thesis = Thesis(
        student_id=data.student_id,
        title=data.title,
        description=data.description,
        status=data.status or ThesisStatus.PROPOSAL,
    )
    db.add(thesis)

    try:
        db.flush()  # assigns thesis.id without committing

        for position, lecturer_id in enumerate(data.lecturer_ids):
            db.add(
                ThesisLecturer(
                    thesis_id=thesis.id,
                    lecturer_id=lecturer_id,
                    is_primary=position == 0,
                )
            )

        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("thesis creation rolled back: %s", exc.orig)
        raise ReferentialIntegrityViolation("Thesis could not be created: invalid reference")
    except Exception:
        db.rollback()
        raise

    db.refresh(thesis)
    logger.info(
        "created thesis id=%s for student id=%s with %d supervisor(s)",
        thesis.id,
        thesis.student_id,
        len(data.lecturer_ids),
    )
    return thesis


def update_thesis(db: Session, thesis_id: int, data: ThesisUpdate) -> Thesis:
    thesis = db.query(Thesis).filter(Thesis.id == thesis_id).first()
    if not thesis:
        raise NotFound("Thesis not found")

    # exclude_unset: omitted fields stay as they are, explicit nulls are applied
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(thesis, field, value)
    thesis.updated_at = touch(thesis.updated_at)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(thesis)
    return thesis


def get_thesis(db: Session, thesis_id: int) -> Thesis | None:
    return (
        db.query(Thesis)
        .options(
            joinedload(Thesis.student),
            selectinload(Thesis.supervisors).joinedload(ThesisLecturer.lecturer),
        )
        .filter(Thesis.id == thesis_id)
        .first()
    )


def list_theses(db: Session) -> list[Thesis]:
    return db.query(Thesis).order_by(Thesis.id.asc()).all()


def list_theses_by_student(db: Session, student_id: int) -> list[Thesis]:
    return (
        db.query(Thesis)
        .filter(Thesis.student_id == student_id)
        .order_by(Thesis.id.asc())
        .all()
    )


def list_theses_by_lecturer(db: Session, lecturer_id: int) -> list[Thesis]:
    return (
        db.query(Thesis)
        .join(ThesisLecturer, ThesisLecturer.thesis_id == Thesis.id)
        .filter(ThesisLecturer.lecturer_id == lecturer_id)
        .order_by(Thesis.id.asc())
        .all()
    )


def delete_thesis(db: Session, thesis_id: int) -> bool:
    thesis = db.query(Thesis).filter(Thesis.id == thesis_id).first()
    if not thesis:
        return False

    db.delete(thesis)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("deleted thesis id=%s", thesis_id)
    return True
