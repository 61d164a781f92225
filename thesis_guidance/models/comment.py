import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from thesis_guidance.db.base_class import Base, UTCDateTime, utcnow


class CommentType(str, enum.Enum):
    GENERAL = "GENERAL"
    FILE_COMMENT = "FILE_COMMENT"


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)

    guidance_session_id = Column(
        Integer,
        ForeignKey("guidance_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    submission_id = Column(
        Integer, ForeignKey("submissions.id", ondelete="CASCADE"), nullable=True, index=True
    )
    sender_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    receiver_id = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )

    content = Column(Text, nullable=False)
    comment_type = Column(Enum(CommentType, name="comment_type"), nullable=False)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    guidance_session = relationship("GuidanceSession", back_populates="comments")
    submission = relationship("Submission", back_populates="comments")
    sender = relationship("User", foreign_keys=[sender_id])
    receiver = relationship("User", foreign_keys=[receiver_id])
