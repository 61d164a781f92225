import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from thesis_guidance.core.errors import NotFound, ReferentialIntegrityViolation
from thesis_guidance.crud.guidance_sessions import get_guidance_session
from thesis_guidance.crud.submissions import get_submission
from thesis_guidance.models.comment import Comment
from thesis_guidance.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)


def create_comment(db: Session, data: CommentCreate) -> Comment:
    if not get_guidance_session(db, data.guidance_session_id):
        raise NotFound("Guidance session not found")

    if data.submission_id is not None and not get_submission(db, data.submission_id):
        raise NotFound("Submission not found")

    comment = Comment(
        guidance_session_id=data.guidance_session_id,
        submission_id=data.submission_id,
        sender_id=data.sender_id,
        receiver_id=data.receiver_id,
        content=data.content,
        comment_type=data.comment_type,
    )
    db.add(comment)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("comment rejected by storage: %s", exc.orig)
        raise ReferentialIntegrityViolation("Comment sender or receiver does not exist")

    db.refresh(comment)
    logger.info(
        "created comment id=%s in session id=%s (%s)",
        comment.id,
        comment.guidance_session_id,
        comment.comment_type.value,
    )
    return comment


def list_comments_by_session(db: Session, session_id: int) -> list[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.guidance_session_id == session_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )


def list_comments_by_submission(db: Session, submission_id: int) -> list[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.submission_id == submission_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )


def delete_comment(db: Session, comment_id: int) -> bool:
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        return False

    db.delete(comment)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
