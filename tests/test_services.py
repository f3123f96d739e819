"""Unit tests for app.services.users and app.services.buses against an in-memory database."""

import unittest

from sqlalchemy.orm import sessionmaker

from app.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
)
from app.models import Bus
from app.schemas.bus import BusPayload
from app.services.buses import (
    create_bus,
    delete_bus,
    list_buses,
    parse_bus_id,
    update_bus,
)
from app.services.users import authenticate_user, normalize_role, register_user
from support import BUS_12A, make_engine


class ServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = make_engine()
        self.db = sessionmaker(bind=self.engine)()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class TestNormalizeRole(unittest.TestCase):
    def test_known_roles(self) -> None:
        self.assertEqual(normalize_role("admin"), "admin")
        self.assertEqual(normalize_role(" Admin "), "admin")
        self.assertEqual(normalize_role("user"), "user")

    def test_absent_or_unknown_defaults_to_user(self) -> None:
        self.assertEqual(normalize_role(None), "user")
        self.assertEqual(normalize_role(""), "user")
        self.assertEqual(normalize_role("owner"), "user")


class TestUserService(ServiceTestCase):
    def test_register_and_authenticate(self) -> None:
        user = register_user(self.db, "  alice ", "pw", "admin")
        self.assertEqual(user.username, "alice")
        self.assertEqual(user.role, "admin")
        self.assertEqual(authenticate_user(self.db, "alice", "pw").id, user.id)

    def test_duplicate_is_conflict_and_session_stays_usable(self) -> None:
        register_user(self.db, "alice", "pw")
        with self.assertRaises(ConflictError):
            register_user(self.db, "alice", "other")
        # the failed insert was rolled back
        self.assertEqual(register_user(self.db, "bob", "pw").username, "bob")

    def test_empty_credentials_are_invalid_input(self) -> None:
        with self.assertRaises(InvalidInputError):
            register_user(self.db, "", "pw")
        with self.assertRaises(InvalidInputError):
            register_user(self.db, "alice", "")
        with self.assertRaises(InvalidInputError):
            register_user(self.db, None, None)

    def test_bad_credentials(self) -> None:
        register_user(self.db, "alice", "pw")
        for username, password in [("alice", "wrong"), ("nobody", "pw"), ("", "pw"), ("alice", None)]:
            with self.assertRaises(InvalidCredentialsError):
                authenticate_user(self.db, username, password)


class TestBusService(ServiceTestCase):
    def _payload(self, **overrides: object) -> BusPayload:
        return BusPayload.model_validate({**BUS_12A, **overrides})

    def test_create_maps_camel_case_fields(self) -> None:
        bus = create_bus(self.db, self._payload())
        self.assertIsNotNone(bus.id)
        self.assertEqual(bus.bus_number, "12A")
        self.assertEqual(bus.seats, 40)
        self.assertEqual(bus.departure_point, "A")
        self.assertEqual(bus.destination_point, "B")
        self.assertEqual(bus.departure_time, "08:00")

    def test_create_strips_strings(self) -> None:
        bus = create_bus(self.db, self._payload(route="  R1  "))
        self.assertEqual(bus.route, "R1")

    def test_numeric_bus_number_is_accepted_as_text(self) -> None:
        bus = create_bus(self.db, self._payload(busNumber=12))
        self.assertEqual(bus.bus_number, "12")

    def test_incomplete_payload_writes_nothing(self) -> None:
        with self.assertRaises(InvalidInputError) as ctx:
            create_bus(self.db, BusPayload(bus_number="12A", seats=40))
        self.assertEqual(ctx.exception.message, "Please fill all fields")
        self.assertEqual(self.db.query(Bus).count(), 0)

    def test_update_is_full_replace(self) -> None:
        bus = create_bus(self.db, self._payload())
        updated = update_bus(self.db, bus.id, self._payload(seats=12, destinationPoint="Z"))
        self.assertEqual(updated.seats, 12)
        self.assertEqual(updated.destination_point, "Z")
        with self.assertRaises(InvalidInputError):
            update_bus(self.db, bus.id, BusPayload(seats=99))

    def test_update_missing_bus(self) -> None:
        with self.assertRaises(NotFoundError):
            update_bus(self.db, 42, self._payload())

    def test_delete(self) -> None:
        bus = create_bus(self.db, self._payload())
        delete_bus(self.db, bus.id)
        self.assertEqual(list_buses(self.db), [])
        with self.assertRaises(NotFoundError):
            delete_bus(self.db, bus.id)

    def test_list_is_ordered_by_id(self) -> None:
        first = create_bus(self.db, self._payload(busNumber="1"))
        second = create_bus(self.db, self._payload(busNumber="2"))
        self.assertEqual([b.id for b in list_buses(self.db)], [first.id, second.id])


class TestParseBusId(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(parse_bus_id("17"), 17)

    def test_invalid_is_not_found(self) -> None:
        for raw in ["abc", "", "0", "-3", "1.5"]:
            with self.assertRaises(NotFoundError):
                parse_bus_id(raw)
