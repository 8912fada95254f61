# File: tests/conftest.py

import os

# Keep the import-time app off the on-disk database and make bcrypt cheap.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "development"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.api.deps import get_db
from taskboard.db.init_db import init_db
from taskboard.main import create_application


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app = create_application(create_tables=False)
    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def register(client):
    """Register through the API and return the {user, token} body."""

    def _register(name="Alice", email="alice@x.com", password="secret1"):
        resp = client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register


@pytest.fixture()
def alice(register):
    return register()


@pytest.fixture()
def bob(register):
    return register(name="Bob", email="bob@x.com", password="hunter22")


@pytest.fixture()
def alice_headers(alice):
    return auth_header(alice["token"])


@pytest.fixture()
def bob_headers(bob):
    return auth_header(bob["token"])
