"""Bus repository: list, create, full-replace update and delete."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidInputError, NotFoundError
from app.models import Bus
from app.schemas.bus import BUS_FIELDS, BusPayload

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill all fields"
BUS_NOT_FOUND_MESSAGE = "Bus not found"


def _complete_fields(payload: BusPayload) -> dict[str, object]:
    """
    Return all six bus fields from payload, stripped.

    Raises InvalidInputError if any field is missing, null or blank.
    """
    values: dict[str, object] = {}
    for name in BUS_FIELDS:
        value = getattr(payload, name)
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            raise InvalidInputError(MISSING_FIELDS_MESSAGE)
        values[name] = value
    return values


def parse_bus_id(raw_id: str) -> int:
    """Convert a path id to an int; anything that cannot name a stored bus is NotFound."""
    try:
        bus_id = int(raw_id)
    except (TypeError, ValueError):
        raise NotFoundError(BUS_NOT_FOUND_MESSAGE)
    if bus_id < 1:
        raise NotFoundError(BUS_NOT_FOUND_MESSAGE)
    return bus_id


def get_bus(db: Session, bus_id: int) -> Bus:
    bus = db.get(Bus, bus_id)
    if bus is None:
        raise NotFoundError(BUS_NOT_FOUND_MESSAGE)
    return bus


def list_buses(db: Session) -> list[Bus]:
    return db.query(Bus).order_by(Bus.id).all()


def create_bus(db: Session, payload: BusPayload) -> Bus:
    """Validate that every field is present, then insert. Nothing is written on failure."""
    values = _complete_fields(payload)
    bus = Bus(**values)
    db.add(bus)
    db.commit()
    db.refresh(bus)
    logger.info("Bus created: bus_id=%s bus_number=%s", bus.id, bus.bus_number)
    return bus


def update_bus(db: Session, bus_id: int, payload: BusPayload) -> Bus:
    """Replace every field of an existing bus. The payload must carry all six fields."""
    bus = get_bus(db, bus_id)
    values = _complete_fields(payload)
    for name, value in values.items():
        setattr(bus, name, value)
    db.commit()
    db.refresh(bus)
    logger.info("Bus updated: bus_id=%s", bus.id)
    return bus


def delete_bus(db: Session, bus_id: int) -> None:
    bus = get_bus(db, bus_id)
    db.delete(bus)
    db.commit()
    logger.info("Bus deleted: bus_id=%s", bus_id)
