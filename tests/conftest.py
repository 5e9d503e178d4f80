"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.responses import Response

from dscvit.api.deps import get_db
from dscvit.core.cookies import PrivateCookieJar
from dscvit.core.security import CookieCipher
from dscvit.db.init_db import init_db
from dscvit.main import app


@pytest.fixture
def engine():
    """In-memory SQLite database with the schema created"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session: Session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def cipher():
    return CookieCipher("test-secret")


@pytest.fixture
def make_jar(cipher):
    """Build a cookie jar over the given incoming cookies and a fresh response"""
    def _make(cookies=None):
        response = Response()
        return PrivateCookieJar(cookies or {}, response, cipher), response
    return _make


@pytest.fixture
def client(engine):
    """FastAPI test client backed by the in-memory database"""
    TestingSession = sessionmaker(bind=engine, autoflush=False)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, base_url="https://testserver")
    app.dependency_overrides.clear()
