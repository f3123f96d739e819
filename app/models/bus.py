"""ORM model for bus records."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class Bus(Base):
    """A scheduled bus. All six descriptive fields are required."""

    __tablename__ = "buses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bus_number = Column(String(64), nullable=False, index=True)
    seats = Column(Integer, nullable=False)
    route = Column(String(255), nullable=False)
    departure_point = Column(String(255), nullable=False)
    destination_point = Column(String(255), nullable=False)
    departure_time = Column(String(64), nullable=False)
