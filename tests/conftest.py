"""
Shared fixtures for the TriVault test suite.

Every test gets its own SQLite file under tmp_path, an admin account, a
bearer token for it, and a TestClient whose ``get_db`` dependency is bound
to that database.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Settings are read at import time – provide them before any backend import
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production-use")
os.environ.setdefault("TRIVAULT_LOG_DIR", str(Path(tempfile.gettempdir()) / "trivault-test-log"))

BACKEND_DIR = Path(__file__).resolve().parent.parent / "backend"
sys.path.insert(0, str(BACKEND_DIR))

from fastapi.testclient import TestClient  # noqa: E402

from core.security import hash_password, issue_token_for  # noqa: E402
from database import Base, get_db  # noqa: E402
from main import app  # noqa: E402
from models.user import User  # noqa: E402
from passwords.service import VaultService  # noqa: E402

import models.password_entry  # noqa: F401, E402
import models.activity_log    # noqa: F401, E402

ADMIN_PASSWORD = "Secret123"


@pytest.fixture(scope="session")
def admin_password_hash():
    """pbkdf2 at 600k rounds is slow – hash the shared test password once."""
    return hash_password(ADMIN_PASSWORD)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'vault.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def _make_admin(db, name, email, password_hash):
    user = User(name=name, email=email, password_hash=password_hash, role="admin", is_active=True)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin(db, admin_password_hash):
    return _make_admin(db, "Sarah Johnson", "sarah@agency.com", admin_password_hash)


@pytest.fixture
def other_admin(db, admin_password_hash):
    return _make_admin(db, "Mike Chen", "mike@agency.com", admin_password_hash)


@pytest.fixture
def vault(db, admin):
    return VaultService(db, admin)


@pytest.fixture
def auth_headers(admin):
    return {"Authorization": f"Bearer {issue_token_for(admin)}"}


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
