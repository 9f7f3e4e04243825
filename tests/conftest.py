"""
Shared pytest fixtures for the Hometasks test suite.

API tests run against an in-memory SQLite database shared through a
StaticPool. The app's ``get_db`` dependency is overridden to hand out the
same session the test uses, and every table is wiped after each test.
"""
import os
from types import SimpleNamespace

# settings are read at import time, so these go in before any hometasks import
os.environ.setdefault("HOMETASKS_SECRET_KEY", "test-secret-key-for-testing-only-0123456789")
os.environ.setdefault("HOMETASKS_DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hometasks.api.deps import get_db
from hometasks.db.base import Base
from hometasks.main import app
from hometasks.models import Family, User
from hometasks.services.security import hash_password, create_access_token

TEST_PASSWORD = "secret-pass"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    future=True,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


# ---------------------------------------------------------------------------
# Database / application lifecycle
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session", autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="session")
def password_hash():
    # bcrypt is slow; hash once for every seeded user
    return hash_password(TEST_PASSWORD)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    yield session
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Seed helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def make_user(db, password_hash):
    def _make(email, *, is_verified=True, family=None, is_family_head=False, first_name="John", last_name="Doe"):
        u = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            hashed_password=password_hash,
            is_verified=is_verified,
            family_id=family.id if family else None,
            is_family_head=is_family_head,
        )
        db.add(u)
        db.commit()
        db.refresh(u)
        return u
    return _make


@pytest.fixture
def household(db, make_user):
    """A family of two: a verified head and a verified regular member."""
    fam = Family(name="Doe")
    db.add(fam)
    db.commit()
    head = make_user("head@hometasks.io", family=fam, is_family_head=True)
    member = make_user("member@hometasks.io", family=fam, first_name="Jane")
    return SimpleNamespace(family=fam, head=head, member=member)


@pytest.fixture
def not_verified_user(make_user):
    return make_user("not-verified@hometasks.io", is_verified=False)


@pytest.fixture
def auth():
    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token(user)}"}
    return _headers
