"""Health check endpoint: database connectivity and session store size."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.core.sessions import SessionStore, get_session_store
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Expired sessions are purged as a side effect so the count is accurate.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    store.purge_expired()

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
        active_sessions=len(store),
    )
