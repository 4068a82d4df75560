"""Shared fixtures: an in-memory database and an API client bound to it."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from backend.app.api.v1.tasks import provider_dependency
from backend.app.db import models  # noqa: F401
from backend.app.db.session import get_session
from backend.app.main import app
from backend.app.services.provider import CompletionProvider, ProviderError


class StubProvider(CompletionProvider):
    """Completion provider that returns a canned reply or raises."""

    name = "stub"

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def complete(self, system: str, prompt: str) -> str:
        self.calls.append((system, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_provider():
    return StubProvider


@pytest.fixture
def failing_provider() -> StubProvider:
    return StubProvider(error=ProviderError("connection refused"))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine) -> Generator[TestClient, None, None]:
    def _session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[provider_dependency] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()
