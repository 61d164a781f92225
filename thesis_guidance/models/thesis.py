import enum

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from thesis_guidance.db.base_class import Base, UTCDateTime, utcnow


class ThesisStatus(str, enum.Enum):
    PROPOSAL = "PROPOSAL"
    IN_PROGRESS = "IN_PROGRESS"
    REVISION = "REVISION"
    COMPLETED = "COMPLETED"


class Thesis(Base):
    __tablename__ = "theses"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        Enum(ThesisStatus, name="thesis_status"),
        nullable=False,
        default=ThesisStatus.PROPOSAL,
    )

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    student = relationship("Student", back_populates="theses")

    supervisors = relationship(
        "ThesisLecturer",
        back_populates="thesis",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ThesisLecturer.id",
    )

    guidance_sessions = relationship(
        "GuidanceSession",
        back_populates="thesis",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ThesisLecturer(Base):
    __tablename__ = "thesis_lecturers"

    id = Column(Integer, primary_key=True, index=True)
    thesis_id = Column(
        Integer, ForeignKey("theses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    lecturer_id = Column(
        Integer, ForeignKey("lecturers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_primary = Column(Boolean, nullable=False, default=False)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("thesis_id", "lecturer_id", name="uq_thesis_lecturer"),
    )

    thesis = relationship("Thesis", back_populates="supervisors")
    lecturer = relationship("Lecturer", back_populates="thesis_links")
