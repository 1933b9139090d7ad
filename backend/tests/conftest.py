import os

# Settings are read at import time; make sure the app imports cleanly in tests.
os.environ.setdefault("JWT_SECRET", "test_jwt_secret")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from house_hunter.core.base import Base
from house_hunter.core import config as app_config
from house_hunter.core.database import get_db
from house_hunter.core.security import hash_password

# Import models so they register with SQLAlchemy metadata.
from house_hunter.models.user import User
from house_hunter.models.house import House  # noqa: F401


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite for fast, isolated tests.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # The in-memory DB persists across tests with StaticPool; reset schema per test.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def _reset_mutable_settings():
    """
    Tests tweak the process-global settings object; restore it after each test.
    """
    keys = [
        "ENV",
        "JWT_SECRET",
        "ACCESS_TOKEN_EXPIRE_MINUTES",
        "SESSION_COOKIE_NAME",
        "TOKEN_ISSUER_SECRET",
    ]
    original = {k: getattr(app_config.settings, k) for k in keys}
    try:
        yield
    finally:
        for k, v in original.items():
            setattr(app_config.settings, k, v)


@pytest.fixture()
def app(db_session):
    from house_hunter.main import app as fastapi_app

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def anon_client(app):
    """
    A second client with its own (empty) cookie jar.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def existing_user(db_session):
    user = User(
        email="tenant@example.com",
        password_hash=hash_password("correct horse battery"),
        profile={"name": "Tenant", "role": "renter"},
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
