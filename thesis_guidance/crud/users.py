import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from thesis_guidance.core.config import Settings
from thesis_guidance.core.errors import Conflict, Unauthorized
from thesis_guidance.core.security import create_access_token, hash_password, verify_password
from thesis_guidance.models.user import User
from thesis_guidance.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)

# Same message for unknown user and wrong password (no username enumeration)
INVALID_CREDENTIALS = "Invalid credentials"


def scrub(user: User) -> UserRead:
    """Detach a user from its credential before it leaves the repository."""
    return UserRead.model_validate(user)


def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def list_users(db: Session) -> list[UserRead]:
    return [scrub(u) for u in db.query(User).order_by(User.id.asc()).all()]


def register_user(db: Session, data: UserCreate) -> UserRead:
    if get_user_by_username(db, data.username):
        logger.warning("registration rejected: username %r taken", data.username)
        raise Conflict("Username already exists")

    if db.query(User).filter(User.email == data.email).first():
        logger.warning("registration rejected: email already registered")
        raise Conflict("Email already exists")

    user = User(
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
        role=data.role,
    )
    db.add(user)

    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration
        db.rollback()
        raise Conflict("Username or email already exists")

    db.refresh(user)
    logger.info("registered user id=%s role=%s", user.id, user.role.value)
    return scrub(user)


def authenticate_user(
    db: Session, username: str, password: str, settings: Settings
) -> tuple[UserRead, str]:
    user = get_user_by_username(db, username)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("login failed for username %r", username)
        raise Unauthorized(INVALID_CREDENTIALS)

    token = create_access_token(user.id, settings)
    return scrub(user), token


def delete_user(db: Session, user_id: int) -> bool:
    user = get_user(db, user_id)
    if not user:
        return False

    db.delete(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("deleted user id=%s (profiles and dependents cascaded)", user_id)
    return True
