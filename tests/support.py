"""Shared base class for API tests: in-memory SQLite, fresh session store, TestClient."""

import unittest
from datetime import UTC, datetime, timedelta

from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.sessions import SessionStore, get_session_store
from app.main import app
from app.models import Base

BUS_12A = {
    "busNumber": "12A",
    "seats": 40,
    "route": "R1",
    "departurePoint": "A",
    "destinationPoint": "B",
    "departureTime": "08:00",
}


class FakeClock:
    """Settable clock for SessionStore, starting at the real current time."""

    def __init__(self) -> None:
        self.now = datetime.now(UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


def make_engine() -> Engine:
    """Fresh in-memory database with all tables; one connection shared by every session."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


class ApiTestCase(unittest.TestCase):
    """Wires the app to a private database and session store for each test."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.store = SessionStore(ttl_seconds=3600)

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_session_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        app.dependency_overrides.clear()
        self.engine.dispose()

    def new_client(self) -> TestClient:
        """A second browser: same app, separate cookie jar."""
        client = TestClient(app)
        self.addCleanup(client.close)
        return client

    def register(
        self,
        client: TestClient,
        username: str,
        password: str = "secret-pw",
        role: str | None = None,
    ):
        body = {"username": username, "password": password}
        if role is not None:
            body["role"] = role
        return client.post("/register", json=body)

    def admin_client(self, username: str = "admin") -> TestClient:
        client = self.new_client()
        resp = self.register(client, username, role="admin")
        self.assertEqual(resp.status_code, 201, resp.text)
        return client

    def user_client(self, username: str = "rider") -> TestClient:
        client = self.new_client()
        resp = self.register(client, username)
        self.assertEqual(resp.status_code, 201, resp.text)
        return client
