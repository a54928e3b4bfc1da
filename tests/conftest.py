"""Pytest configuration and fixtures."""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from direcional.config.database import get_db
from direcional.core.auth.service import AuthService
from direcional.main import app
from direcional.shared.database.models import Base, Client, Apartment
from direcional.shared.enums import UserRole


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def api(session_factory):
    """TestClient with get_db bound to the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session):
    return AuthService.register_user(
        db_session, "admin", "admin@direcional.com.br", "admin123", role=UserRole.ADMIN.value
    )


@pytest.fixture
def regular_user(db_session):
    return AuthService.register_user(
        db_session, "corretor", "corretor@direcional.com.br", "corretor123"
    )


@pytest.fixture
def admin_headers(admin_user) -> dict:
    return {"Authorization": f"Bearer {AuthService.token_for(admin_user)}"}


@pytest.fixture
def user_headers(regular_user) -> dict:
    return {"Authorization": f"Bearer {AuthService.token_for(regular_user)}"}


def make_client(db, name="Cliente Teste", cpf="12345678909", **kwargs) -> Client:
    client = Client(name=name, cpf=cpf, **kwargs)
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


def make_apartment(db, unit_number="101", price=Decimal("250000.00"), **kwargs) -> Apartment:
    data = {
        "block": "A",
        "floor": 1,
        "total_area": Decimal("68.50"),
        "bedrooms": 2,
        "bathrooms": 1,
    }
    data.update(kwargs)
    apartment = Apartment(unit_number=unit_number, price=price, **data)
    db.add(apartment)
    db.commit()
    db.refresh(apartment)
    return apartment


@pytest.fixture
def buyer(db_session) -> Client:
    """Client C1."""
    return make_client(db_session, name="Ana Pereira", cpf="11144477735")


@pytest.fixture
def other_buyer(db_session) -> Client:
    """Client C2."""
    return make_client(db_session, name="Bruno Costa", cpf="52998224725")


@pytest.fixture
def apartment(db_session) -> Apartment:
    """Apartment A1, Available, price 250000."""
    return make_apartment(db_session)
