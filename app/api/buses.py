"""Bus endpoints: public listing, admin-only create, update and delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.auth import require_admin
from app.core.database import get_db
from app.core.errors import InternalError
from app.core.sessions import SessionData
from app.schemas.auth import MessageResponse
from app.schemas.bus import BusMutationResponse, BusPayload, BusRead
from app.services.buses import (
    create_bus,
    delete_bus,
    list_buses,
    parse_bus_id,
    update_bus,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[BusRead])
def get_buses(db: Annotated[Session, Depends(get_db)]) -> list[BusRead]:
    """List all buses. No authentication required."""
    try:
        buses = list_buses(db)
    except SQLAlchemyError as e:
        logger.exception("Error fetching buses")
        raise InternalError("Error fetching buses") from e
    return [BusRead.model_validate(bus) for bus in buses]


@router.post("", response_model=BusMutationResponse, status_code=201)
def post_bus(
    body: BusPayload,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[SessionData, Depends(require_admin)],
) -> BusMutationResponse:
    """Add a bus (admin only). All six fields are required."""
    try:
        bus = create_bus(db, body)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error adding bus")
        raise InternalError("Error adding bus") from e
    return BusMutationResponse(message="Bus added successfully", bus=BusRead.model_validate(bus))


@router.put("/{bus_id}", response_model=BusMutationResponse)
def put_bus(
    bus_id: str,
    body: BusPayload,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[SessionData, Depends(require_admin)],
) -> BusMutationResponse:
    """
    Replace a bus (admin only).

    Every field is overwritten, so the body must carry all six fields.
    Returns 404 if no bus has this id.
    """
    try:
        bus = update_bus(db, parse_bus_id(bus_id), body)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error updating bus")
        raise InternalError("Error updating bus") from e
    return BusMutationResponse(message="Bus updated successfully", bus=BusRead.model_validate(bus))


@router.delete("/{bus_id}", response_model=MessageResponse)
def remove_bus(
    bus_id: str,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[SessionData, Depends(require_admin)],
) -> MessageResponse:
    """Delete a bus (admin only). Returns 404 if no bus has this id."""
    try:
        delete_bus(db, parse_bus_id(bus_id))
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error deleting bus")
        raise InternalError("Error deleting bus") from e
    return MessageResponse(message="Bus deleted successfully")
