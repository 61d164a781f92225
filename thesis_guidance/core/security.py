import secrets
from datetime import datetime, timezone

import jwt
from passlib.context import CryptContext

from thesis_guidance.core.config import Settings

# scrypt with ln=14 (n=16384, r=8) needs 16 MiB per derivation
pwd_context = CryptContext(
    schemes=["scrypt"],
    deprecated="auto",
    scrypt__default_rounds=14,
)


def hash_password(password: str) -> str:
    """Hash with a fresh salt; the result embeds cost, salt and derived key."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Constant-time check. Malformed or empty hashes never match."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: int, settings: Settings, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire,
        # nonce: tokens minted in the same second still differ
        "jti": secrets.token_urlsafe(16),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> int | None:
    """
    Returns the user id carried by a valid token, or None.

    Rejects bad signatures, expired tokens, malformed payloads and
    non-integer subjects.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "iat", "exp"]},
        )
    except jwt.InvalidTokenError:
        return None

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None
