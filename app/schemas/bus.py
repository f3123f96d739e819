"""Pydantic schemas for bus records. JSON field names are camelCase."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BUS_FIELDS: tuple[str, ...] = (
    "bus_number",
    "seats",
    "route",
    "departure_point",
    "destination_point",
    "departure_time",
)


class BusPayload(BaseModel):
    """
    Body for create and update. Every field is optional at the schema level so
    that a missing field is reported as one generic 400 by the bus service
    instead of a per-field validation error.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    bus_number: str | None = Field(default=None, max_length=64)
    seats: int | None = Field(default=None, ge=1)
    route: str | None = Field(default=None, max_length=255)
    departure_point: str | None = Field(default=None, max_length=255)
    destination_point: str | None = Field(default=None, max_length=255)
    departure_time: str | None = Field(default=None, max_length=64)


class BusRead(BaseModel):
    """A stored bus including its assigned id."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    bus_number: str
    seats: int
    route: str
    departure_point: str
    destination_point: str
    departure_time: str


class BusMutationResponse(BaseModel):
    """Response for create and update: confirmation plus the stored record."""

    message: str
    bus: BusRead
