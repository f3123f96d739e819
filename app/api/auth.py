"""Registration, login, logout and the session-based auth dependencies (require_authenticated, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.errors import InternalError
from app.core.guards import ensure_admin, ensure_authenticated
from app.core.security import read_session_id, sign_session_id
from app.core.sessions import SessionData, SessionStore, get_session_store
from app.models import User
from app.schemas.auth import AuthResponse, LoginRequest, MessageResponse, RegisterRequest
from app.services.users import authenticate_user, register_user

logger = logging.getLogger(__name__)
router = APIRouter()


def _session_id_from_cookie(request: Request) -> str | None:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return read_session_id(token)


def get_current_session(
    request: Request,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> SessionData | None:
    """Dependency: the live session named by the request cookie, or None."""
    session_id = _session_id_from_cookie(request)
    if session_id is None:
        return None
    return store.get(session_id)


def require_authenticated(
    session: Annotated[SessionData | None, Depends(get_current_session)],
) -> SessionData:
    """Dependency: require a live session. Raises 401 if missing or expired."""
    return ensure_authenticated(session)


def require_admin(
    session: Annotated[SessionData, Depends(require_authenticated)],
) -> SessionData:
    """Dependency: require an authenticated session with role 'admin'. Raises 403 for non-admin."""
    ensure_admin(session)
    return session


def _start_session(
    request: Request,
    response: Response,
    store: SessionStore,
    user: User,
) -> SessionData:
    """Issue a fresh session for user and set the signed cookie; any previous session is dropped."""
    previous = _session_id_from_cookie(request)
    if previous is not None:
        store.destroy(previous)
    session = store.create(user_id=user.id, role=user.role)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_id(session.session_id, session.expires_at),
        max_age=store.ttl_seconds,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return session


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    body: RegisterRequest,
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> AuthResponse:
    """
    Create an account and log it in.

    Role defaults to 'user' when absent or not one of 'user' / 'admin'.
    Returns 400 if the username is taken.
    """
    try:
        user = register_user(db, body.username, body.password, body.role)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error registering user")
        raise InternalError("Error registering user") from e
    _start_session(request, response, store, user)
    return AuthResponse(message="User registered successfully", role=user.role, user_id=user.id)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> AuthResponse:
    """
    Authenticate with username and password and start a session.

    Unknown usernames and wrong passwords both return 401 with the same message.
    """
    try:
        user = authenticate_user(db, body.username, body.password)
    except SQLAlchemyError as e:
        logger.exception("Error logging in")
        raise InternalError("Error logging in") from e
    _start_session(request, response, store, user)
    logger.info("User logged in: user_id=%s", user.id)
    return AuthResponse(message="Login successful", role=user.role, user_id=user.id)


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> MessageResponse:
    """Destroy the current session (if any) and clear the cookie."""
    try:
        session_id = _session_id_from_cookie(request)
        if session_id is not None and store.destroy(session_id):
            logger.info("Session ended")
    except Exception as e:
        logger.exception("Error logging out")
        raise InternalError("Error logging out") from e
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return MessageResponse(message="Logout successful")
