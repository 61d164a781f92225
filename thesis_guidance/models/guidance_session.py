from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from thesis_guidance.db.base_class import Base, UTCDateTime, utcnow


class GuidanceSession(Base):
    __tablename__ = "guidance_sessions"

    id = Column(Integer, primary_key=True, index=True)
    thesis_id = Column(
        Integer, ForeignKey("theses.id", ondelete="CASCADE"), nullable=False, index=True
    )

    session_date = Column(UTCDateTime(), default=utcnow, nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    thesis = relationship("Thesis", back_populates="guidance_sessions")

    submissions = relationship(
        "Submission",
        back_populates="guidance_session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    comments = relationship(
        "Comment",
        back_populates="guidance_session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
