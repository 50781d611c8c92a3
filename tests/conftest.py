"""
Shared pytest fixtures — in‑memory SQLite + FastAPI TestClient, plus fake
HTTP endpoints for the relay and the provider.
"""
import json
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from chopchop.database import Base, get_db
from chopchop.deps import get_bridge, get_provider
from chopchop.main import app
from chopchop.models import FridgeItemModel, UserSessionModel  # noqa: F401  — register models
from chopchop.pipeline.bridge import LlmBridge
from chopchop.provider import GeminiProvider
from chopchop.store import open_session

# StaticPool ensures all connections share the same in-memory database
_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_Session = sessionmaker(autocommit=False, autoflush=False, bind=_ENGINE)


@pytest.fixture(autouse=True)
def _reset_tables():
    Base.metadata.create_all(bind=_ENGINE)
    yield
    Base.metadata.drop_all(bind=_ENGINE)


@pytest.fixture()
def db():
    session = _Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    def _override():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers(db):
    session = open_session(db, "user-1")
    return {"Authorization": f"Bearer {session.token}"}


class FakeEndpoint:
    """httpx.MockTransport handler that records requests and replies with
    whatever was last queued via :meth:`reply`."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.body = None
        self.content = None
        self.error = None

    def reply(self, body=None, status=200, content=None):
        self.body = body
        self.status = status
        self.content = content

    def fail(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        return httpx.Response(self.status, json=self.body)

    @property
    def payloads(self) -> list:
        return [json.loads(r.content) for r in self.requests]

    @property
    def prompts(self) -> list[str]:
        return [p["contents"][0]["parts"][0]["text"] for p in self.payloads]

    def http_client(self, base_url: str) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler), base_url=base_url)


@pytest.fixture()
def relay():
    endpoint = FakeEndpoint()
    endpoint.reply({"text": "[]"})
    return endpoint


@pytest.fixture()
def bridge(relay):
    with relay.http_client("http://relay.test") as http:
        yield LlmBridge(http)


@pytest.fixture()
def relay_client(client, bridge):
    """TestClient whose pipeline routes talk to the fake relay."""
    app.dependency_overrides[get_bridge] = lambda: bridge
    return client


@pytest.fixture()
def provider():
    return FakeEndpoint()


@pytest.fixture()
def provider_key():
    return "test-key"


@pytest.fixture()
def provider_client(client, provider, provider_key):
    """TestClient whose relay route talks to the fake provider."""
    http = provider.http_client("https://provider.test/v1beta")
    app.dependency_overrides[get_provider] = lambda: GeminiProvider(
        http, api_key=provider_key, model="gemini-1.5-flash"
    )
    yield client
    http.close()
