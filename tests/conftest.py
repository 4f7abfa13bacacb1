# tests/conftest.py
from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from espressoapi.core.config import Settings
from espressoapi.db import create_engine, create_schema, create_session_factory
from espressoapi.main import create_app
from espressoapi.repositories.sqlalchemy import translator_for_dialect


# ==== Fake session plumbing for repository unit tests ====
class FakeMappings:
    def __init__(self, rows):
        self._rows = rows

    def one_or_none(self):
        return self._rows[0] if self._rows else None

    def all(self):
        return list(self._rows)


class FakeResult:
    def __init__(self, rows=(), rowcount=1, inserted_primary_key=(1,)):
        self._rows = list(rows)
        self.rowcount = rowcount
        self.inserted_primary_key = inserted_primary_key

    def mappings(self):
        return FakeMappings(self._rows)


class FakeSession:
    def __init__(self, result=None, error=None):
        self.execute = AsyncMock(return_value=result or FakeResult(), side_effect=error)
        self.commit = AsyncMock()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSessionFactory:
    """Stands in for ``async_sessionmaker``: every call hands out the same session."""

    def __init__(self, session: FakeSession):
        self.session = session
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.session


@pytest.fixture
def fake_session_factory():
    def _make(result=None, error=None) -> FakeSessionFactory:
        return FakeSessionFactory(FakeSession(result=result, error=error))

    return _make


# ==== SQLite store (foreign keys on) ====
@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    eng = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'espresso.db'}", "sqlite")
    await create_schema(eng)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def store(engine):
    return SimpleNamespace(
        session_factory=create_session_factory(engine),
        translator=translator_for_dialect(engine.dialect.name),
    )


# ==== FastAPI app / client ====
def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def app_factory():
    def _make(**overrides):
        return create_app(make_settings(**overrides))

    return _make


@pytest_asyncio.fixture
async def live_client(store):
    """Client against the SQLite store; lifespan is bypassed by wiring app.state directly."""
    app = create_app(make_settings())
    app.state.session_factory = store.session_factory
    app.state.error_translator = store.translator
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake_result():
    return FakeResult
