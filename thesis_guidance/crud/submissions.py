import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from thesis_guidance.core.errors import ReferentialIntegrityViolation
from thesis_guidance.models.submission import Submission
from thesis_guidance.schemas.submission import SubmissionCreate

logger = logging.getLogger(__name__)


def create_submission(db: Session, data: SubmissionCreate) -> Submission:
    # guidance_session_id / uploaded_by are left to the foreign keys
    submission = Submission(
        guidance_session_id=data.guidance_session_id,
        file_name=data.file_name,
        file_path=data.file_path,
        file_size=data.file_size,
        uploaded_by=data.uploaded_by,
        description=data.description,
    )
    db.add(submission)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("submission rejected by storage: %s", exc.orig)
        raise ReferentialIntegrityViolation(
            "Submission references a guidance session or uploader that does not exist"
        )

    db.refresh(submission)
    logger.info(
        "recorded submission id=%s (%s, %d bytes) in session id=%s",
        submission.id,
        submission.file_name,
        submission.file_size,
        submission.guidance_session_id,
    )
    return submission


def list_submissions_by_session(db: Session, session_id: int) -> list[Submission]:
    return (
        db.query(Submission)
        .filter(Submission.guidance_session_id == session_id)
        .order_by(Submission.id.asc())
        .all()
    )


def get_submission(db: Session, submission_id: int) -> Submission | None:
    return db.query(Submission).filter(Submission.id == submission_id).first()


def delete_submission(db: Session, submission_id: int) -> bool:
    submission = get_submission(db, submission_id)
    if not submission:
        return False

    db.delete(submission)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
