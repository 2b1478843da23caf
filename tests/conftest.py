"""Shared fixtures for the festival notification tests."""

from __future__ import annotations

import json
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``app`` package) is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

TEST_DB_PATH = Path(tempfile.mkdtemp(prefix="festival-tests-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from starlette.websockets import WebSocketState  # noqa: E402

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.infrastructure import database  # noqa: E402
from app.infrastructure import models  # noqa: E402,F401
from app.infrastructure.notifications import ConnectionRegistry, NotificationFanOut  # noqa: E402


class FakeWebSocket:
    """Websocket stand-in that records every text frame it is sent."""

    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.accepted = False
        self.closed_with: int | None = None
        self.messages: list[dict] = []
        self.application_state = WebSocketState.CONNECTING

    async def accept(self) -> None:
        self.accepted = True
        self.application_state = WebSocketState.CONNECTED

    async def send_text(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("socket is gone")
        self.messages.append(json.loads(text))

    async def close(self, code: int = 1000) -> None:
        self.closed_with = code
        self.application_state = WebSocketState.DISCONNECTED

    def events(self, event_name: str) -> list:
        return [message["data"] for message in self.messages if message["type"] == event_name]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def setup_database():
    """Give every test empty tables."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


@pytest.fixture
def session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


@pytest.fixture
def fanout(registry: ConnectionRegistry) -> NotificationFanOut:
    return NotificationFanOut(registry, database.SessionLocal)


@pytest.fixture
def connect(registry: ConnectionRegistry):
    """Return a coroutine that registers a fake socket and optionally authenticates it."""

    async def _connect(role: str | None = None, user_id: str | None = None, *, fail: bool = False):
        websocket = FakeWebSocket(fail=fail)
        connection_id = await registry.connect(websocket)
        if role is not None:
            registry.authenticate(connection_id, role=role, user_id=user_id)
        return connection_id, websocket

    return _connect


@pytest.fixture
def client():
    """Return a test client bound to a fresh application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
