"""Password hashing and signing of the session id cookie."""

from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from app.core.config import settings

SESSION_TOKEN_ALGORITHM = "HS256"

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def sign_session_id(session_id: str, expires_at: datetime | None = None) -> str:
    """Wrap an opaque session id in a signed token suitable for a cookie value."""
    now = datetime.now(UTC)
    expire = expires_at or now + timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)
    payload = {"sid": session_id, "iat": now, "exp": expire}
    return jwt.encode(
        payload,
        settings.SESSION_SECRET.get_secret_value(),
        algorithm=SESSION_TOKEN_ALGORITHM,
    )


def read_session_id(token: str) -> str | None:
    """
    Return the session id carried by a signed cookie value.

    Returns None when the signature does not match, the token expired, or the
    payload has no session id.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SESSION_SECRET.get_secret_value(),
            algorithms=[SESSION_TOKEN_ALGORITHM],
        )
    except jwt.PyJWTError:
        return None
    sid = payload.get("sid")
    if not isinstance(sid, str) or not sid:
        return None
    return sid
