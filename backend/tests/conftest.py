import os
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set env vars BEFORE any app imports
_here = Path(__file__).parent
os.environ["ASSETDESK_POLICIES_PATH"] = str(_here.parent / "assetdesk" / "policies.yaml")
os.environ["ASSETDESK_STORAGE"] = "sql"

# Use a temp file-based SQLite so all connections share the same database
_db_file = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
_db_file.close()
_TEST_DB_URL = f"sqlite:///{_db_file.name}"
os.environ["DATABASE_URL"] = _TEST_DB_URL

from assetdesk.db.database import Base, get_db  # noqa: E402
from assetdesk.db.repository import reset_memory_stores  # noqa: E402
from assetdesk.main import app  # noqa: E402

_test_engine = create_engine(_TEST_DB_URL, connect_args={"check_same_thread": False})
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)


@pytest.fixture(autouse=True)
def setup_db():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=_test_engine)
    yield
    Base.metadata.drop_all(bind=_test_engine)
    reset_memory_stores()


@pytest.fixture
def db():
    session = _TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(monkeypatch, client):
    """Same app, backed by the in-memory stores."""
    monkeypatch.setenv("ASSETDESK_STORAGE", "memory")
    reset_memory_stores()
    return client


@pytest.fixture
def tenant(client):
    """A Starter tenant; pass its id in X-Tenant-ID to act inside it."""
    r = client.post("/api/tenants/", json={"name": "Acme Hotels", "subscription_plan": "Starter"})
    assert r.status_code == 201
    return r.json()
