import logging

from sqlalchemy.orm import Session

from thesis_guidance.core.errors import NotFound
from thesis_guidance.db.base_class import touch, utcnow
from thesis_guidance.models.guidance_session import GuidanceSession
from thesis_guidance.models.thesis import Thesis
from thesis_guidance.schemas.guidance_session import GuidanceSessionCreate

logger = logging.getLogger(__name__)


def create_guidance_session(db: Session, data: GuidanceSessionCreate) -> GuidanceSession:
    thesis_exists = db.query(Thesis.id).filter(Thesis.id == data.thesis_id).first() is not None
    if not thesis_exists:
        raise NotFound(f"Thesis with ID {data.thesis_id} does not exist")

    guidance = GuidanceSession(
        thesis_id=data.thesis_id,
        session_date=data.session_date or utcnow(),
        notes=data.notes,
    )
    db.add(guidance)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(guidance)
    logger.info("created guidance session id=%s for thesis id=%s", guidance.id, guidance.thesis_id)
    return guidance


def list_guidance_sessions_by_thesis(db: Session, thesis_id: int) -> list[GuidanceSession]:
    # newest session first
    return (
        db.query(GuidanceSession)
        .filter(GuidanceSession.thesis_id == thesis_id)
        .order_by(GuidanceSession.session_date.desc(), GuidanceSession.id.desc())
        .all()
    )


def get_guidance_session(db: Session, session_id: int) -> GuidanceSession | None:
    return db.query(GuidanceSession).filter(GuidanceSession.id == session_id).first()


def update_guidance_session_notes(db: Session, session_id: int, notes: str) -> GuidanceSession:
    guidance = get_guidance_session(db, session_id)
    if not guidance:
        raise NotFound(f"Guidance session with ID {session_id} does not exist")

    guidance.notes = notes
    guidance.updated_at = touch(guidance.updated_at)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(guidance)
    return guidance


def delete_guidance_session(db: Session, session_id: int) -> bool:
    guidance = get_guidance_session(db, session_id)
    if not guidance:
        return False

    db.delete(guidance)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
