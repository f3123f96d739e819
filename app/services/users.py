"""User registration and credential checks."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, InvalidCredentialsError, InvalidInputError
from app.core.guards import ROLE_USER, ROLES
from app.core.security import hash_password, verify_password
from app.models import User

logger = logging.getLogger(__name__)


def normalize_role(role: str | None) -> str:
    """Return role if it is a known role, otherwise 'user'."""
    if role is None:
        return ROLE_USER
    candidate = role.strip().lower()
    return candidate if candidate in ROLES else ROLE_USER


def register_user(
    db: Session,
    username: str | None,
    password: str | None,
    role: str | None = None,
) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Uniqueness is enforced by the unique index on users.username: the insert is
    attempted directly and an IntegrityError becomes ConflictError, so two
    concurrent registrations of the same name cannot both succeed.
    """
    name = (username or "").strip()
    if not name or not password:
        raise InvalidInputError("Username and password are required")

    user = User(
        username=name,
        password_hash=hash_password(password),
        role=normalize_role(role),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("User already exists") from e
    db.refresh(user)
    logger.info("User registered: user_id=%s role=%s", user.id, user.role)
    return user


def authenticate_user(db: Session, username: str | None, password: str | None) -> User:
    """Return the user for valid credentials; unknown user and bad password fail alike."""
    name = (username or "").strip()
    if not name or not password:
        raise InvalidCredentialsError()
    user = db.query(User).filter(User.username == name).first()
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user
