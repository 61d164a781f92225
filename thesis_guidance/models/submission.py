from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from thesis_guidance.db.base_class import Base, UTCDateTime, utcnow


class Submission(Base):
    __tablename__ = "submissions"

    id = Column(Integer, primary_key=True, index=True)

    guidance_session_id = Column(
        Integer,
        ForeignKey("guidance_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    uploaded_by = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # file metadata only; the bytes live wherever file_path points
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(1024), nullable=False)
    file_size = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    guidance_session = relationship("GuidanceSession", back_populates="submissions")
    uploader = relationship("User")

    comments = relationship(
        "Comment",
        back_populates="submission",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
