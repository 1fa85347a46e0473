# tests/conftest.py

import os

# Keep the module-level engine away from the developer database.
os.environ.setdefault("SMARTBARBER_DATABASE_URL", "sqlite://")

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, select

from smartbarber.auth import create_access_token
from smartbarber.db import get_session, init_db, make_engine
from smartbarber.main import app
from smartbarber.models import Barber, Service, User
from smartbarber.seed import seed_catalog


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        seed_catalog(session)
        yield session


@pytest.fixture
def barbers(session):
    return session.exec(select(Barber).order_by(Barber.name)).all()


@pytest.fixture
def services(session):
    return session.exec(select(Service).order_by(Service.price)).all()


@pytest.fixture
def barber(barbers):
    return barbers[0]


@pytest.fixture
def other_barber(barbers):
    return barbers[1]


@pytest.fixture
def service(services):
    return services[0]


def _make_user(session, name, email):
    user = User(name=name, email=email, password_hash="not-a-real-hash")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def user(session):
    return _make_user(session, "Una Owner", "una@example.com")


@pytest.fixture
def other_user(session):
    return _make_user(session, "Otto Other", "otto@example.com")


@pytest.fixture
def day():
    return date.today() + timedelta(days=3)


@pytest.fixture
def client(session):
    def _get_session_override():
        yield session

    app.dependency_overrides[get_session] = _get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def other_auth_headers(other_user):
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}
