"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
)
from app.schemas.bus import BUS_FIELDS, BusMutationResponse, BusPayload, BusRead
from app.schemas.health import HealthResponse

__all__ = [
    "AuthResponse",
    "BUS_FIELDS",
    "BusMutationResponse",
    "BusPayload",
    "BusRead",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
]
