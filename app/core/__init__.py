"""Core app configuration, database, security and session state."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.sessions import get_session_store

__all__ = ["get_settings", "settings", "get_db", "get_session_store"]
