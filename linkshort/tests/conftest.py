import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from linkshort.main import create_app
from linkshort.db.Models.models import Base
from linkshort.db.Connection import database
from linkshort.core.config import Settings


# Create in-memory SQLite database for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
PASSWORD = "s3cret"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def db_session():
    """Creates a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_app(db_session, tmp_path):
    """Builds an app on the test database; keyword arguments override Settings."""
    apps = []

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    def _make_app(**overrides):
        values = {
            "prefix": "s",
            "db": ":memory:",
            "password": PASSWORD,
            "resources_dir": str(tmp_path / "resources"),
        }
        values.update(overrides)
        app = create_app(Settings(**values), engine=engine)
        app.dependency_overrides[database.get_db] = override_get_db
        apps.append(app)
        return app

    yield _make_app
    for app in apps:
        app.dependency_overrides.clear()


@pytest.fixture
def client(make_app):
    """Creates a test client with overridden database dependency."""
    return TestClient(make_app())


@pytest.fixture
def add(client):
    """Shortens an address with the correct password and returns the response."""
    def _add(address, path="/api/add"):
        return client.post(path, json={"address": address, "password": PASSWORD})
    return _add
