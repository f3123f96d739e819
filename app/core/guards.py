"""Authorization guards. Each guard passes silently or raises an ApiError with the reason."""

from app.core.errors import ForbiddenError, UnauthenticatedError
from app.core.sessions import SessionData

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = frozenset({ROLE_ADMIN, ROLE_USER})


def ensure_authenticated(session: SessionData | None) -> SessionData:
    """Require a session carrying a user identity."""
    if session is None or session.user_id is None:
        raise UnauthenticatedError("Authentication required")
    return session


def ensure_admin(session: SessionData | None) -> SessionData | None:
    """
    Require the admin role.

    Identity is not checked here; run ensure_authenticated first. A missing
    role counts as non-admin.
    """
    role = getattr(session, "role", None)
    if role != ROLE_ADMIN:
        raise ForbiddenError("Admin access required")
    return session
