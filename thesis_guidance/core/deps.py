from collections.abc import Iterator

from sqlalchemy.orm import Session

from thesis_guidance.db.session import SessionLocal


def get_db() -> Iterator[Session]:
    """One session per request. Left-over work is rolled back if the handler fails."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
