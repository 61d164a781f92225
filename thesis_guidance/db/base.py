# Import all models here so Base.metadata sees every table
# (used by init_db, Alembic and the test suite).
from thesis_guidance.db.base_class import Base  # noqa: F401
from thesis_guidance.models.comment import Comment  # noqa: F401
from thesis_guidance.models.guidance_session import GuidanceSession  # noqa: F401
from thesis_guidance.models.lecturer import Lecturer  # noqa: F401
from thesis_guidance.models.student import Student  # noqa: F401
from thesis_guidance.models.submission import Submission  # noqa: F401
from thesis_guidance.models.thesis import Thesis, ThesisLecturer  # noqa: F401
from thesis_guidance.models.user import User  # noqa: F401
